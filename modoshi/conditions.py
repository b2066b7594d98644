"""
Condition algebra for Modoshi.

Every grammatical condition declared by a language descriptor is encoded as
an integer bitmask. Leaf conditions own a single bit; a composite condition
(one with sub-conditions) is the bitwise OR of its children.
"""

from typing import Dict, Iterable, List, Sequence, Tuple

from modoshi.errors import SubConditionCycle, TooManyConditions, UnknownCondition
from modoshi.settings import MAX_CONDITION_FLAGS


# ============================================================================
# Flag Construction
# ============================================================================

def build_condition_flags(
    entries: Iterable[Tuple[str, "Condition"]],
    starting_index: int = 0,
    limit: int = MAX_CONDITION_FLAGS,
) -> Tuple[Dict[str, int], int]:
    """
    Assign a flag to every condition.

    Leaves are handed fresh bits in declaration order. A composite condition
    is resolved on the first pass in which all of its sub-conditions already
    have flags, so the worklist is swept until it is empty.

    Args:
        entries: (identifier, Condition) pairs, in declaration order.
        starting_index: First free bit.
        limit: Bit ceiling; reaching it raises TooManyConditions.

    Returns:
        Tuple of (identifier -> flag map, next free bit index).

    Raises:
        SubConditionCycle: If a sweep makes no progress.
        TooManyConditions: If the leaf bits run out.

    Example:
        >>> from modoshi.rules import Condition
        >>> flags, nxt = build_condition_flags([
        ...     ("a", Condition("A")), ("b", Condition("B")),
        ...     ("c", Condition("C", sub_conditions=("a", "b"))),
        ... ])
        >>> flags, nxt
        ({'a': 1, 'b': 2, 'c': 3}, 2)
    """
    next_index = starting_index
    flags_map: Dict[str, int] = {}
    targets: List[Tuple[str, "Condition"]] = list(entries)

    while targets:
        pending: List[Tuple[str, "Condition"]] = []
        for condition_type, condition in targets:
            if condition.sub_conditions:
                if not all(sub in flags_map for sub in condition.sub_conditions):
                    pending.append((condition_type, condition))
                    continue
                flags_map[condition_type] = resolve_mask(flags_map, condition.sub_conditions)
            else:
                if next_index >= limit:
                    raise TooManyConditions(limit)
                flags_map[condition_type] = 1 << next_index
                next_index += 1

        if len(pending) == len(targets):
            raise SubConditionCycle([condition_type for condition_type, _ in pending])
        targets = pending

    return flags_map, next_index


def resolve_mask(flags_map: Dict[str, int], identifiers: Sequence[str]) -> int:
    """
    OR together the flags of the named conditions.

    An empty list gives 0, which leaves a rule's input side unrestricted.

    Raises:
        UnknownCondition: If a name is missing from the map.
    """
    mask = 0
    for index, name in enumerate(identifiers):
        try:
            mask |= flags_map[name]
        except KeyError:
            raise UnknownCondition(name, index) from None
    return mask


def lookup_mask(flags_map: Dict[str, int], identifiers: Iterable[str]) -> int:
    """Like resolve_mask, but unknown names contribute 0."""
    mask = 0
    for name in identifiers:
        mask |= flags_map.get(name, 0)
    return mask


def conditions_match(current: int, following: int) -> bool:
    """
    Check whether a rule guarded by `following` may fire on a candidate
    whose conditions are `current`.

    A candidate with no conditions yet (the verbatim input) matches every
    rule; otherwise the two masks must share a bit.
    """
    return current == 0 or (current & following) != 0
