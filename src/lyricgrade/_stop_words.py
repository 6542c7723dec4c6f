"""Per-language stop words and basic verbs excluded from key vocabulary."""

STOP_WORDS: dict[str, frozenset[str]] = {
    "es": frozenset({
        # Articles
        "el", "la", "los", "las", "un", "una", "unos", "unas", "lo",
        # Pronouns
        "yo", "tú", "él", "ella", "usted", "nosotros", "nosotras",
        "vosotros", "vosotras", "ellos", "ellas", "ustedes",
        "me", "te", "se", "le", "nos", "os", "les", "mí", "ti",
        "mi", "tu", "su", "mis", "tus", "sus", "nuestro", "nuestra",
        # Prepositions and contractions
        "a", "ante", "bajo", "con", "contra", "de", "desde", "en", "entre",
        "hacia", "hasta", "para", "por", "sin", "sobre", "tras", "del", "al",
        # Conjunctions
        "y", "e", "o", "u", "pero", "mas", "sino", "que", "si", "porque",
        "pues", "aunque", "ni",
        # Adverbs and other function words
        "no", "sí", "muy", "más", "menos", "ya", "aún", "ahora", "aquí",
        "ahí", "allí", "así", "tan", "tanto", "bien", "entonces", "también",
        "este", "esta", "esto", "estos", "estas", "ese", "esa", "eso",
        "esos", "esas", "aquel", "aquella", "aquello", "aquellos", "aquellas",
        "cual", "cuales", "quien", "quienes", "donde", "cuando", "como",
        "qué", "todo", "otro", "mucho", "poco", "mismo", "cada", "nada",
        "uno", "dos",
    }),
    "fr": frozenset({
        # Articles
        "le", "la", "les", "un", "une", "des", "du", "au", "aux",
        # Pronouns
        "je", "tu", "il", "elle", "nous", "vous", "ils", "elles", "on",
        "me", "te", "se", "moi", "toi", "lui", "leur", "leurs", "y", "en",
        "mon", "ma", "mes", "ton", "ta", "tes", "son", "sa", "ses",
        "notre", "nos", "votre", "vos",
        # Prepositions
        "à", "de", "dans", "pour", "par", "sur", "avec", "sans", "sous",
        "vers", "chez",
        # Conjunctions
        "et", "ou", "mais", "donc", "or", "ni", "car", "que", "qui", "si",
        "comme", "quand",
        # Adverbs and other function words
        "ne", "pas", "non", "oui", "très", "plus", "moins", "bien", "mal",
        "tout", "tous", "toute", "toutes", "ce", "cet", "cette", "ces",
        "ça", "cela",
    }),
}

# Verbs too basic to be worth studying as vocabulary.
BASIC_VERBS: dict[str, frozenset[str]] = {
    "es": frozenset({
        "ser", "estar", "haber", "tener", "hacer", "poder", "decir", "ir",
        "ver", "dar", "saber", "querer", "llegar", "pasar", "deber", "poner",
        "parecer", "quedar", "creer", "hablar", "llevar", "dejar", "seguir",
        "encontrar", "llamar", "venir", "pensar", "salir", "volver", "tomar",
        "conocer", "vivir",
    }),
    "fr": frozenset({
        "être", "avoir", "faire", "dire", "pouvoir", "aller", "voir",
        "savoir", "vouloir", "venir", "devoir", "prendre", "trouver",
        "donner", "parler", "mettre", "passer",
    }),
}
