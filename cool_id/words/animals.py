"""Animals paired with an animal prefix to form the subject of an id."""

ANIMALS: tuple[str, ...] = (
    "aardvark",
    "albatross",
    "alligator",
    "alpaca",
    "anteater",
    "antelope",
    "armadillo",
    "baboon",
    "badger",
    "barracuda",
    "bat",
    "beaver",
    "bison",
    "boar",
    "buffalo",
    "butterfly",
    "camel",
    "capybara",
    "caribou",
    "cat",
    "chameleon",
    "cheetah",
    "chicken",
    "chinchilla",
    "chipmunk",
    "cobra",
    "cougar",
    "coyote",
    "crab",
    "crane",
    "crocodile",
    "crow",
    "deer",
    "dingo",
    "dog",
    "dolphin",
    "donkey",
    "dove",
    "dragonfly",
    "duck",
    "eagle",
    "eel",
    "elephant",
    "elk",
    "emu",
    "falcon",
    "ferret",
    "flamingo",
    "fox",
    "frog",
    "gazelle",
    "gecko",
    "gerbil",
    "giraffe",
    "gnu",
    "goat",
    "goose",
    "gorilla",
    "grasshopper",
    "hamster",
    "hare",
    "hawk",
    "hedgehog",
    "heron",
    "hippopotamus",
    "horse",
    "hyena",
    "ibis",
    "iguana",
    "impala",
    "jackal",
    "jaguar",
    "jellyfish",
    "kangaroo",
    "koala",
    "lemur",
    "leopard",
    "llama",
    "lobster",
    "lynx",
    "magpie",
    "mammoth",
    "manatee",
    "meerkat",
    "mole",
    "mongoose",
    "moose",
    "mouse",
    "narwhal",
    "newt",
    "octopus",
    "okapi",
    "orca",
    "ostrich",
    "otter",
    "owl",
    "panda",
    "panther",
    "parrot",
    "peacock",
    "pelican",
    "penguin",
    "pig",
    "pigeon",
    "platypus",
    "porcupine",
    "puffin",
    "quail",
    "rabbit",
    "raccoon",
    "raven",
    "rhino",
    "salamander",
    "seal",
    "shark",
    "sheep",
    "skunk",
    "sloth",
    "snail",
    "sparrow",
    "squid",
    "squirrel",
    "stingray",
    "stork",
    "swan",
    "tapir",
    "tiger",
    "toad",
    "toucan",
    "turkey",
    "turtle",
    "vulture",
    "walrus",
    "warthog",
    "weasel",
    "whale",
    "wolf",
    "wolverine",
    "wombat",
    "yak",
    "zebra",
)
