"""Prefixes that open the subject of an id.

Exactly one family is used per id: ``ANIMAL_PREFIXES`` before an animal,
``JOB_PREFIXES`` before an occupation.
"""

ANIMAL_PREFIXES: tuple[str, ...] = (
    "alien",
    "astro",
    "atomic",
    "bionic",
    "cosmic",
    "cyber",
    "disco",
    "galactic",
    "hyper",
    "laser",
    "mecha",
    "mega",
    "mutant",
    "neon",
    "ninja",
    "nuclear",
    "pirate",
    "plasma",
    "quantum",
    "robot",
    "rocket",
    "space",
    "super",
    "turbo",
    "ultra",
    "vampire",
    "viking",
    "zombie",
)

JOB_PREFIXES: tuple[str, ...] = (
    "apprentice",
    "celebrity",
    "chief",
    "cowboy",
    "freelance",
    "grand",
    "junior",
    "legendary",
    "master",
    "midnight",
    "weekend",
    "retired",
    "rockstar",
    "royal",
    "senior",
    "steampunk",
    "superstar",
    "turbo",
    "ultra",
    "undercover",
    "veteran",
)
