"""Minimal example for flatten and unflatten."""

from kv_flat import Options, flatten, unflatten


def main() -> None:
    """Flatten a nested config and rebuild it with default and bracketed options."""
    config = {"service": {"name": "api", "ports": [8080, 8443], "tls": {}}}

    flat = flatten(config)
    print("flat:", flat)
    print("unflattened:", unflatten(flat))

    options = Options(array_delimiter="BRACKETS", slice_deep_merge=True)
    flat = flatten(config, options)
    print("flat with brackets:", flat)
    print("unflattened with brackets:", unflatten(flat, options))

    env_options = Options(delimiter="__", max_depth=2)
    print("env style:", {key.upper(): value for key, value in flatten(config, env_options).items()})


if __name__ == "__main__":
    main()
