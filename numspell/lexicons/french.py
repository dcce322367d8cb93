"""French lexicon (long scale, vigesimal 70-99)."""

from numspell.models.lexicon import Lexicon, LexiconGrammar, ScaleName


FRENCH = Lexicon(
    code="fr",
    name="French",
    units=(
        "zéro", "un", "deux", "trois", "quatre",
        "cinq", "six", "sept", "huit", "neuf",
        "dix", "onze", "douze", "treize", "quatorze",
        "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf",
    ),
    tens=(
        "vingt", "trente", "quarante", "cinquante",
        "soixante", "soixante-dix", "quatre-vingts", "quatre-vingt-dix",
    ),
    irregular={
        21: "vingt et un",
        31: "trente et un",
        41: "quarante et un",
        51: "cinquante et un",
        61: "soixante et un",
        70: "soixante-dix",
        71: "soixante et onze",
        72: "soixante-douze",
        73: "soixante-treize",
        74: "soixante-quatorze",
        75: "soixante-quinze",
        76: "soixante-seize",
        77: "soixante-dix-sept",
        78: "soixante-dix-huit",
        79: "soixante-dix-neuf",
        80: "quatre-vingts",
        81: "quatre-vingt-un",
        82: "quatre-vingt-deux",
        83: "quatre-vingt-trois",
        84: "quatre-vingt-quatre",
        85: "quatre-vingt-cinq",
        86: "quatre-vingt-six",
        87: "quatre-vingt-sept",
        88: "quatre-vingt-huit",
        89: "quatre-vingt-neuf",
        90: "quatre-vingt-dix",
        91: "quatre-vingt-onze",
        92: "quatre-vingt-douze",
        93: "quatre-vingt-treize",
        94: "quatre-vingt-quatorze",
        95: "quatre-vingt-quinze",
        96: "quatre-vingt-seize",
        97: "quatre-vingt-dix-sept",
        98: "quatre-vingt-dix-huit",
        99: "quatre-vingt-dix-neuf",
    },
    scales=(
        ScaleName(exponent=1, singular="mille"),
        ScaleName(exponent=2, singular="million", plural="millions"),
        ScaleName(exponent=3, singular="milliard", plural="milliards"),
        ScaleName(exponent=4, singular="billion", plural="billions"),
        ScaleName(exponent=5, singular="billiard", plural="billiards"),
        ScaleName(exponent=6, singular="trillion", plural="trillions"),
        ScaleName(exponent=7, singular="trilliard", plural="trilliards"),
        ScaleName(exponent=8, singular="quadrillion", plural="quadrillions"),
        ScaleName(exponent=9, singular="quadrilliard", plural="quadrilliards"),
        ScaleName(exponent=10, singular="quintillion", plural="quintillions"),
        ScaleName(exponent=11, singular="quintilliard", plural="quintilliards"),
    ),
    grammar=LexiconGrammar(
        zero_word="zéro",
        negative_word="moins",
        point_word="virgule",
        currency_connector="et",
        tens_joiner="-",
        hundred_word="cent",
        hundred_plural="cents",
        bare_hundred=True,
        bare_scale_exponents=frozenset({1}),
    ),
)
