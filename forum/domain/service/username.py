"""Generated display names of the form ``AdjectiveColorAnimal``."""

import secrets

ADJECTIVES = (
    "Brave", "Calm", "Clever", "Eager", "Gentle", "Happy", "Jolly", "Keen",
    "Lively", "Lucky", "Mighty", "Nimble", "Polite", "Proud", "Quick",
    "Quiet", "Shy", "Swift", "Witty", "Zesty",
)

COLORS = (
    "Amber", "Azure", "Black", "Blue", "Bronze", "Coral", "Crimson", "Gold",
    "Green", "Indigo", "Ivory", "Jade", "Lime", "Olive", "Plum", "Red",
    "Ruby", "Silver", "Teal", "White",
)

ANIMALS = (
    "Badger", "Bear", "Crane", "Eagle", "Falcon", "Fox", "Gecko", "Hare",
    "Heron", "Koala", "Lynx", "Moose", "Otter", "Owl", "Panda", "Raven",
    "Seal", "Tiger", "Walrus", "Wolf",
)


def generate_username(suffix_digits: int = 0) -> str:
    """Build a random ``AdjectiveColorAnimal`` name.

    Args:
        suffix_digits: Number of random digits appended to the name

    Returns:
        Generated username, at most 30 characters for suffixes up to 12 digits
    """
    name = secrets.choice(ADJECTIVES) + secrets.choice(COLORS) + secrets.choice(ANIMALS)
    if suffix_digits:
        name += "".join(str(secrets.randbelow(10)) for _ in range(suffix_digits))
    return name
