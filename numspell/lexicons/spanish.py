"""Spanish lexicon (long scale: mil millones, billón)."""

from numspell.models.lexicon import Lexicon, LexiconGrammar, ScaleName


# Odd exponents from 3 up are "mil" of the -llón below them; the
# composer pairs them (mil millones, mil billones).
_LLONES = (
    (2, "millón", "millones"),
    (4, "billón", "billones"),
    (6, "trillón", "trillones"),
    (8, "cuatrillón", "cuatrillones"),
    (10, "quintillón", "quintillones"),
)


def _scales() -> tuple[ScaleName, ...]:
    scales = [ScaleName(exponent=1, singular="mil")]
    for exponent, singular, plural in _LLONES:
        scales.append(ScaleName(exponent=exponent, singular=singular, plural=plural))
        scales.append(ScaleName(exponent=exponent + 1, singular="mil"))
    return tuple(scales)


SPANISH = Lexicon(
    code="es",
    name="Spanish",
    units=(
        "cero", "uno", "dos", "tres", "cuatro",
        "cinco", "seis", "siete", "ocho", "nueve",
        "diez", "once", "doce", "trece", "catorce",
        "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    ),
    tens=(
        "veinte", "treinta", "cuarenta", "cincuenta",
        "sesenta", "setenta", "ochenta", "noventa",
    ),
    hundreds=(
        "", "ciento", "doscientos", "trescientos", "cuatrocientos",
        "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos",
    ),
    irregular={100: "cien"},
    scales=_scales(),
    grammar=LexiconGrammar(
        zero_word="cero",
        negative_word="menos",
        point_word="coma",
        currency_connector="con",
        tens_joiner=" y ",
        hundred_word="cien",
        bare_scale_exponents=frozenset({1, 3, 5, 7, 9, 11}),
    ),
)
