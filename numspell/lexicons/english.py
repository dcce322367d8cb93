"""English lexicons: prose style and title-case ledger style."""

from numspell.models.lexicon import Lexicon, LexiconGrammar, ScaleName


_SCALE_WORDS = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
)

ENGLISH = Lexicon(
    code="en",
    name="English",
    units=(
        "zero", "one", "two", "three", "four",
        "five", "six", "seven", "eight", "nine",
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    ),
    tens=(
        "twenty", "thirty", "forty", "fifty",
        "sixty", "seventy", "eighty", "ninety",
    ),
    scales=tuple(
        ScaleName(exponent=exponent, singular=word)
        for exponent, word in enumerate(_SCALE_WORDS, start=1)
    ),
    grammar=LexiconGrammar(
        zero_word="zero",
        negative_word="negative",
        point_word="point",
        currency_connector="and",
        tens_joiner="-",
        hundred_word="hundred",
        hundred_conjunction="and",
        final_group_conjunction="and",
    ),
)

# Cheque and invoice style: "One Hundred Twenty Three Kwacha And Fifty Ngwee"
LEDGER_ENGLISH = Lexicon(
    code="en-ledger",
    name="English (ledger)",
    units=(
        "zero", "One", "Two", "Three", "Four",
        "Five", "Six", "Seven", "Eight", "Nine",
        "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
        "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
    ),
    tens=(
        "Twenty", "Thirty", "Forty", "Fifty",
        "Sixty", "Seventy", "Eighty", "Ninety",
    ),
    scales=tuple(
        ScaleName(exponent=exponent, singular=word.capitalize())
        for exponent, word in enumerate(_SCALE_WORDS, start=1)
    ),
    grammar=LexiconGrammar(
        zero_word="zero",
        negative_word="negative",
        point_word="point",
        currency_connector="And",
        tens_joiner=" ",
        hundred_word="Hundred",
    ),
)
