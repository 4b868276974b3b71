"""Passport field validation."""

_EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
_HEX_DIGITS = frozenset("0123456789abcdef")


def parse_passports(text: str) -> list[dict[str, str]]:
    """Split blank-line separated records into field dictionaries."""
    passports = []
    current: dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            if current:
                passports.append(current)
            current = {}
            continue
        for field in line.split(" "):
            if field:
                header, _, data = field.partition(":")
                current[header] = data
    if current:
        passports.append(current)
    return passports


def is_valid_passport(passport: dict[str, str]) -> bool:
    return len(passport) == 8 or (len(passport) == 7 and "cid" not in passport)


def _is_all_digits(value: str) -> bool:
    return all("0" <= char <= "9" for char in value)


def is_number_in_bounds(value: str, low: int, high: int) -> bool:
    """True if ``value`` is a decimal number within ``[low, high]``."""
    if not _is_all_digits(value):
        return False
    return low <= int(value) <= high


def is_legal_hgt(value: str) -> bool:
    if len(value) < 3 or not _is_all_digits(value[:-2]):
        return False
    if value.endswith("cm"):
        return is_number_in_bounds(value[:-2], 150, 193)
    if value.endswith("in"):
        return is_number_in_bounds(value[:-2], 59, 76)
    return False


def is_legal_hcl(value: str) -> bool:
    return len(value) == 7 and value[0] == "#" and all(c in _HEX_DIGITS for c in value[1:])


def is_legal_ecl(value: str) -> bool:
    return value in _EYE_COLOURS


def is_strict_valid_passport(passport: dict[str, str]) -> bool:
    """Field presence plus the rules for every field's value."""
    return (
        is_valid_passport(passport)
        and is_number_in_bounds(passport["byr"], 1920, 2002)
        and is_number_in_bounds(passport["iyr"], 2010, 2020)
        and is_number_in_bounds(passport["eyr"], 2020, 2030)
        and is_legal_hgt(passport["hgt"])
        and is_legal_hcl(passport["hcl"])
        and is_legal_ecl(passport["ecl"])
        and len(passport["pid"]) == 9
        and _is_all_digits(passport["pid"])
    )


def part1(text: str) -> int:
    return sum(is_valid_passport(p) for p in parse_passports(text))


def part2(text: str) -> int:
    return sum(is_strict_valid_passport(p) for p in parse_passports(text))