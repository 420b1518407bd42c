"""First names used for the name slots of an id."""

NAMES: tuple[str, ...] = (
    "aaron",
    "abigail",
    "adam",
    "adrian",
    "agnes",
    "albert",
    "alice",
    "alfred",
    "amanda",
    "amber",
    "andrew",
    "angela",
    "anna",
    "arthur",
    "audrey",
    "barbara",
    "beatrice",
    "benjamin",
    "bernard",
    "betty",
    "brenda",
    "brian",
    "bruce",
    "carl",
    "carol",
    "caroline",
    "charles",
    "charlotte",
    "chester",
    "clara",
    "claude",
    "colin",
    "craig",
    "daisy",
    "daniel",
    "david",
    "deborah",
    "dennis",
    "diana",
    "donald",
    "doris",
    "dorothy",
    "douglas",
    "edgar",
    "edith",
    "edward",
    "eleanor",
    "elijah",
    "elizabeth",
    "emily",
    "eric",
    "ernest",
    "esther",
    "eugene",
    "felix",
    "fiona",
    "florence",
    "frank",
    "frederick",
    "gary",
    "george",
    "gerald",
    "gertrude",
    "gladys",
    "gloria",
    "gordon",
    "grace",
    "gregory",
    "harold",
    "harriet",
    "harry",
    "hazel",
    "helen",
    "henry",
    "herbert",
    "howard",
    "hugo",
    "irene",
    "isaac",
    "jack",
    "james",
    "jane",
    "janet",
    "jeffrey",
    "jennifer",
    "jerome",
    "jessica",
    "joan",
    "john",
    "joseph",
    "judith",
    "julia",
    "karen",
    "kathleen",
    "keith",
    "kenneth",
    "laura",
    "lawrence",
    "leonard",
    "lillian",
    "linda",
    "louis",
    "lucy",
    "mabel",
    "margaret",
    "marion",
    "martha",
    "martin",
    "mary",
    "maurice",
    "mildred",
    "nancy",
    "neil",
    "norman",
    "oliver",
    "oscar",
    "pamela",
    "patrick",
    "pauline",
    "peter",
    "phyllis",
    "ralph",
    "raymond",
    "rebecca",
    "richard",
    "robert",
    "ronald",
    "rose",
    "roy",
    "ruth",
    "samuel",
    "sandra",
    "sarah",
    "shane",
    "shirley",
    "simon",
    "stanley",
    "stella",
    "stephen",
    "susan",
    "theodore",
    "thomas",
    "timothy",
    "ursula",
    "vera",
    "victor",
    "vincent",
    "vivian",
    "walter",
    "wanda",
    "wendy",
    "wilbur",
    "william",
    "winifred",
    "yvonne",
)
