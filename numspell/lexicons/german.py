"""German lexicon (compounds below a million, long scale above)."""

from numspell.models.lexicon import Lexicon, LexiconGrammar, ScaleName


GERMAN = Lexicon(
    code="de",
    name="German",
    units=(
        "null", "eins", "zwei", "drei", "vier",
        "fünf", "sechs", "sieben", "acht", "neun",
        "zehn", "elf", "zwölf", "dreizehn", "vierzehn",
        "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn",
    ),
    tens=(
        "zwanzig", "dreißig", "vierzig", "fünfzig",
        "sechzig", "siebzig", "achtzig", "neunzig",
    ),
    combining_units={1: "ein"},
    scales=(
        ScaleName(exponent=1, singular="tausend"),
        ScaleName(exponent=2, singular="Million", plural="Millionen"),
        ScaleName(exponent=3, singular="Milliarde", plural="Milliarden"),
        ScaleName(exponent=4, singular="Billion", plural="Billionen"),
        ScaleName(exponent=5, singular="Billiarde", plural="Billiarden"),
        ScaleName(exponent=6, singular="Trillion", plural="Trillionen"),
        ScaleName(exponent=7, singular="Trilliarde", plural="Trilliarden"),
        ScaleName(exponent=8, singular="Quadrillion", plural="Quadrillionen"),
        ScaleName(exponent=9, singular="Quadrilliarde", plural="Quadrilliarden"),
        ScaleName(exponent=10, singular="Quintillion", plural="Quintillionen"),
        ScaleName(exponent=11, singular="Quintilliarde", plural="Quintilliarden"),
    ),
    grammar=LexiconGrammar(
        zero_word="null",
        negative_word="minus",
        point_word="Komma",
        currency_connector="und",
        tens_joiner="und",
        units_first=True,
        hundred_word="hundert",
        hundred_joiner="",
        remainder_joiner="",
    ),
)
