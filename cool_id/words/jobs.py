"""Occupations paired with a job prefix to form the subject of an id."""

JOBS: tuple[str, ...] = (
    "accountant",
    "acrobat",
    "actor",
    "architect",
    "astronaut",
    "astronomer",
    "baker",
    "banker",
    "barber",
    "barista",
    "bartender",
    "blacksmith",
    "botanist",
    "builder",
    "butcher",
    "butler",
    "captain",
    "carpenter",
    "cartographer",
    "cashier",
    "chef",
    "chemist",
    "clerk",
    "clown",
    "courier",
    "dancer",
    "dentist",
    "detective",
    "diplomat",
    "doctor",
    "drummer",
    "economist",
    "editor",
    "electrician",
    "engineer",
    "farmer",
    "firefighter",
    "fisherman",
    "florist",
    "gardener",
    "geologist",
    "glassblower",
    "guitarist",
    "hairdresser",
    "historian",
    "illustrator",
    "inventor",
    "janitor",
    "jeweler",
    "journalist",
    "judge",
    "juggler",
    "lawyer",
    "librarian",
    "lifeguard",
    "locksmith",
    "lumberjack",
    "magician",
    "mechanic",
    "miner",
    "musician",
    "navigator",
    "nurse",
    "painter",
    "pharmacist",
    "photographer",
    "physicist",
    "pilot",
    "plumber",
    "poet",
    "politician",
    "postman",
    "potter",
    "programmer",
    "ranger",
    "reporter",
    "sailor",
    "scientist",
    "sculptor",
    "shepherd",
    "singer",
    "surgeon",
    "tailor",
    "teacher",
    "translator",
    "veterinarian",
    "violinist",
    "weaver",
    "welder",
    "wizard",
    "writer",
    "zookeeper",
)
