"""Adjectives used for the decoration slots of an id."""

ADJECTIVES: tuple[str, ...] = (
    "adorable",
    "adventurous",
    "agreeable",
    "alert",
    "amazing",
    "ambitious",
    "amused",
    "ancient",
    "anxious",
    "arrogant",
    "awesome",
    "bashful",
    "beautiful",
    "bewildered",
    "bold",
    "brave",
    "breezy",
    "bright",
    "brilliant",
    "bubbly",
    "busy",
    "calm",
    "careful",
    "charming",
    "cheerful",
    "clever",
    "clumsy",
    "colossal",
    "cool",
    "courageous",
    "crafty",
    "cranky",
    "crazy",
    "cuddly",
    "curious",
    "daring",
    "dazzling",
    "delightful",
    "determined",
    "diligent",
    "dizzy",
    "eager",
    "elegant",
    "enchanting",
    "energetic",
    "enthusiastic",
    "excited",
    "fabulous",
    "faithful",
    "fancy",
    "fearless",
    "fierce",
    "friendly",
    "funny",
    "fuzzy",
    "gentle",
    "giant",
    "gigantic",
    "glamorous",
    "gleaming",
    "gloomy",
    "glorious",
    "goofy",
    "graceful",
    "grumpy",
    "handsome",
    "happy",
    "helpful",
    "heroic",
    "hilarious",
    "honest",
    "humble",
    "hungry",
    "jolly",
    "jovial",
    "joyful",
    "jumpy",
    "kind",
    "lazy",
    "lively",
    "lonely",
    "loud",
    "lovely",
    "lucky",
    "magnificent",
    "majestic",
    "mighty",
    "mysterious",
    "naughty",
    "nervous",
    "nimble",
    "noble",
    "obedient",
    "outrageous",
    "peaceful",
    "perfect",
    "placid",
    "plucky",
    "polite",
    "proud",
    "quick",
    "quiet",
    "quirky",
    "radiant",
    "relieved",
    "romantic",
    "rowdy",
    "scary",
    "shiny",
    "shy",
    "silly",
    "sleepy",
    "slimy",
    "smooth",
    "sneaky",
    "sparkling",
    "splendid",
    "spotless",
    "stormy",
    "strange",
    "stubborn",
    "sunny",
    "super",
    "swift",
    "talented",
    "tame",
    "tender",
    "terrific",
    "thankful",
    "thoughtful",
    "tiny",
    "tough",
    "unpleasant",
    "upbeat",
    "vigilant",
    "vivacious",
    "wacky",
    "weary",
    "whimsical",
    "wild",
    "witty",
    "wonderful",
    "zany",
    "zealous",
)
