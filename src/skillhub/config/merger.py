"""
Layer merging for SkillHub configuration.

Each configuration source is a plain dict layer; later layers win. A key
prefixed with ``+`` or ``-`` edits the list under the bare key instead of
replacing it, so a project can add an agent to the globally configured list:

    install:
      +agents: [cursor]
"""

from typing import Any


def _edit_list(current: Any, items: list[Any], add: bool) -> list[Any]:
    existing = current if isinstance(current, list) else []
    if add:
        return existing + [item for item in items if item not in existing]
    return [item for item in existing if item not in items]


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge ``override`` onto ``base`` without modifying either.

    Nested dicts merge key by key, a ``None`` value deletes the key, and
    anything else replaces the base value. ``+key`` / ``-key`` lists add or
    remove items from the list at ``key``.
    """
    merged = dict(base)

    for key, value in override.items():
        if key[:1] in ("+", "-") and isinstance(value, list):
            name = key[1:]
            if key[0] == "+" or name in merged:
                merged[name] = _edit_list(merged.get(name), value, add=key[0] == "+")
        elif value is None:
            merged.pop(key, None)
        elif isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value

    return merged


def merge_configs(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge configuration layers from lowest to highest priority."""
    result: dict[str, Any] = {}
    for layer in layers:
        if layer:
            result = deep_merge(result, layer)
    return result


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set ``value`` at a dotted path such as ``install.mode``, creating
    intermediate dicts and replacing non-dict values on the way.
    """
    *parents, leaf = key_path.split(".")
    node = config
    for key in parents:
        if not isinstance(node.get(key), dict):
            node[key] = {}
        node = node[key]
    node[leaf] = value
    return config
