"""Allergen assessment: match allergens to the ingredients that hold them."""

from __future__ import annotations

_CONTAINS = "contains"
_SEPARATORS = str.maketrans({",": " ", ")": " "})


def parse_foods(text: str) -> tuple[dict[str, set[str]], list[str]]:
    """Candidate ingredients for each allergen, and every ingredient occurrence."""
    allergens: dict[str, set[str]] = {}
    occurrences: list[str] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if _CONTAINS not in line:
            raise ValueError(f"food lists no allergens: {line!r}")
        ingredients = line.partition("(")[0].split()
        occurrences.extend(ingredients)
        allergen_text = line[line.index(_CONTAINS) + len(_CONTAINS):]
        for allergen in allergen_text.translate(_SEPARATORS).split():
            known = allergens.get(allergen)
            allergens[allergen] = known & set(ingredients) if known else set(ingredients)
    return allergens, occurrences


def _clear(
    allergens: dict[str, set[str]],
    unknown: list[str],
    allergen: str,
    ingredient: str,
    cleared: set[str],
) -> None:
    follow_up = []
    for other, candidates in allergens.items():
        if other == allergen:
            continue
        candidates.discard(ingredient)
        unknown[:] = [name for name in unknown if name != ingredient]
        if len(candidates) == 1 and other not in cleared:
            cleared.add(other)
            follow_up.append((other, next(iter(candidates))))
    for other, candidate in follow_up:
        _clear(allergens, unknown, other, candidate, cleared)


def resolve_allergens(
    allergens: dict[str, set[str]], unknown_ingredients: list[str]
) -> tuple[dict[str, set[str]], list[str]]:
    """Propagate known allergens; return narrowed candidates and ingredients left unknown."""
    resolved = {name: set(candidates) for name, candidates in allergens.items()}
    unknown = list(unknown_ingredients)
    for allergen, candidates in resolved.items():
        if len(candidates) == 1:
            _clear(resolved, unknown, allergen, next(iter(candidates)), set())
    return resolved, unknown


def part1(text: str) -> int:
    """Occurrences of ingredients that cannot hold any allergen."""
    _, unknown = resolve_allergens(*parse_foods(text))
    return len(unknown)


def part2(text: str) -> str:
    """Dangerous ingredients, ordered by their allergen, comma separated."""
    resolved, _ = resolve_allergens(*parse_foods(text))
    return ",".join(
        next(iter(resolved[allergen]))
        for allergen in sorted(resolved)
        if len(resolved[allergen]) == 1
    )