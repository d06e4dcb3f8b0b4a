"""Configuration commands for the release-note-labeler CLI."""

from cyclopts import App

from release_note_labeler.config import KNOWN_KEYS, get_config, validate_key

config_app = App(name="config", help="Manage configuration")

SECRET_KEYS = ("github.token",)


def _display(key: str, value: str) -> str:
    """Mask secrets, keeping the last four characters so tokens can be told apart."""
    if key in SECRET_KEYS and value:
        return "****" + value[-4:] if len(value) > 8 else "****"
    return value


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Set a configuration setting.

    Args:
        key: Configuration key, one of github.token or github.base_url
        value: Configuration value
        global_: If True, set in global config. If False, set in local config.
    """
    config = get_config(use_global=global_)
    config.set(key, value)
    scope = "global" if global_ else "local"
    print(f"Set {key} = {_display(key, value)} ({scope})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Unset a configuration setting.

    Keys the tool does not read are accepted here so stale entries can be removed.
    """
    config = get_config(use_global=global_)
    config.unset(key)
    scope = "global" if global_ else "local"
    print(f"Unset {key} ({scope})")
    source = config.source(key)
    if source is not None:
        print(f"{key} is still set from {source}")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Get the value of a configuration setting and where it comes from."""
    validate_key(key)
    config = get_config(use_global=global_)
    value = config.get(key)
    if value is None:
        print(f"{key} is not set")
    else:
        print(f"{key} = {_display(key, value)} ({config.source(key)})")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """List every known setting, then any unrecognized keys found in config files."""
    config = get_config(use_global=global_)
    scope = "Global" if global_ else "Configuration"
    print(f"{scope} settings:\n")
    for key in KNOWN_KEYS:
        value = config.get(key)
        if value is None:
            print(f"{key} is not set")
        else:
            print(f"{key} = {_display(key, value)} ({config.source(key)})")

    unknown = [key for key in config.list() if key not in KNOWN_KEYS]
    if unknown:
        print("\nIgnored keys (remove with 'rnl config unset'):")
        for key in unknown:
            print(f"  {key}")
