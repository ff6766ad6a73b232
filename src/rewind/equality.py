"""Equality policies for the Set/Replace no-op check.

- "value":    a == b  (default; matches plain-value semantics for str/int/tuple)
- "identity": a is b  (for mutable compound values compared by reference)

Any two-argument callable is accepted as a custom policy.

The policy result is used as a plain bool. Types whose == does not return
one (numpy arrays, pandas frames) make "value" raise ValueError; give those
stores "identity" or a callable such as numpy.array_equal.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Union

from rewind.errors import ConfigError


PolicyName = Literal["value", "identity"]
Equality = Callable[[Any, Any], bool]


def value_equal(a: Any, b: Any) -> bool:
    return a == b


def identity_equal(a: Any, b: Any) -> bool:
    return a is b


POLICIES: dict[str, Equality] = {
    "value": value_equal,
    "identity": identity_equal,
}


def resolve_equality(policy: Union[str, Equality]) -> Equality:
    if callable(policy):
        return policy

    try:
        return POLICIES[policy]
    except KeyError:
        names = ", ".join(sorted(POLICIES))
        raise ConfigError(
            f"Invalid equality policy: {policy!r} (must be one of: {names})"
        ) from None
