"""Classify Kraken method names into public and private methods."""
from enum import Enum
from typing import Optional

from .endpoints_map import mapping


class MethodPrivacy(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


PUBLIC_METHODS = frozenset(mapping["Kraken"]["public_methods"].values())
PRIVATE_METHODS = frozenset(mapping["Kraken"]["private_methods"].values())

# snake_case alias ==> exchange method name
ALIASES = {**mapping["Kraken"]["public_methods"], **mapping["Kraken"]["private_methods"]}


def resolve_method(method_name: str) -> Optional[str]:
    """Exchange method name for either an exchange name or its alias.

    Returns:
        str, or None if the name is unknown
    """
    if method_name in PUBLIC_METHODS or method_name in PRIVATE_METHODS:
        return method_name
    return ALIASES.get(method_name)


def get_method_type(method_name: str) -> Optional[MethodPrivacy]:
    """Privacy class of a method, None if the method is not recognized.
    """
    resolved = resolve_method(method_name)

    if resolved in PUBLIC_METHODS:
        return MethodPrivacy.PUBLIC
    if resolved in PRIVATE_METHODS:
        return MethodPrivacy.PRIVATE
    return None
