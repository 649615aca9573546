#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation with the shared Latin-1 repertoire data
# - Added literal() and escape_template() pair helpers
# - Added TeX rule generators used by the TeX and German TeX tables
# - Accented dotless i accepts the empty group terminator (\"\i{})
# - Added guillemets and the math-mode Latin-1 symbols (degree, plus-minus, fractions)
#

"""
rule_builders.py - Repertoire data and helpers for building rule tables
=======================================================================

The rule tables are plain ordered lists of (pattern, replacement) pairs.
This module holds the character repertoire they share and small helpers
that turn a literal source/target pair into an escaped regex pair.
"""

import re

# ────────────────────────── repertoire ────────────────────────── #

# (character, TeX accent, base letter). A base of "\\i" is the dotless i.
TEX_ACCENTED = [
    ("ä", '"', "a"),
    ("à", "`", "a"),
    ("á", "'", "a"),
    ("ã", "~", "a"),
    ("â", "^", "a"),
    ("ë", '"', "e"),
    ("è", "`", "e"),
    ("é", "'", "e"),
    ("ê", "^", "e"),
    ("ï", '"', "\\i"),
    ("ì", "`", "\\i"),
    ("í", "'", "\\i"),
    ("î", "^", "\\i"),
    ("ö", '"', "o"),
    ("ò", "`", "o"),
    ("ó", "'", "o"),
    ("õ", "~", "o"),
    ("ô", "^", "o"),
    ("ü", '"', "u"),
    ("ù", "`", "u"),
    ("ú", "'", "u"),
    ("û", "^", "u"),
    ("ý", "'", "y"),
    ("ÿ", '"', "y"),
    ("ñ", "~", "n"),
    ("Ä", '"', "A"),
    ("À", "`", "A"),
    ("Á", "'", "A"),
    ("Ã", "~", "A"),
    ("Â", "^", "A"),
    ("Ë", '"', "E"),
    ("È", "`", "E"),
    ("É", "'", "E"),
    ("Ê", "^", "E"),
    ("Ï", '"', "I"),
    ("Ì", "`", "I"),
    ("Í", "'", "I"),
    ("Î", "^", "I"),
    ("Ö", '"', "O"),
    ("Ò", "`", "O"),
    ("Ó", "'", "O"),
    ("Õ", "~", "O"),
    ("Ô", "^", "O"),
    ("Ü", '"', "U"),
    ("Ù", "`", "U"),
    ("Ú", "'", "U"),
    ("Û", "^", "U"),
    ("Ý", "'", "Y"),
    ("Ñ", "~", "N"),
]

# (character, TeX control word without the backslash)
TEX_CONTROL_WORDS = [
    ("ß", "ss"),
    ("æ", "ae"),
    ("Æ", "AE"),
    ("å", "aa"),
    ("Å", "AA"),
    ("ø", "o"),
    ("Ø", "O"),
    ("©", "copyright"),
    ("£", "pounds"),
    ("¶", "P"),
    ("§", "S"),
    ("«", "guillemotleft"),
    ("»", "guillemotright"),
]

# (character, base letter) for the \c cedilla accent
TEX_CEDILLAS = [
    ("ç", "c"),
    ("Ç", "C"),
]

# (character, TeX ligature)
TEX_LIGATURES = [
    ("¿", "?`"),
    ("¡", "!`"),
]

# (character, math-mode command). Written as {$...$}, read with or without braces
TEX_MATH_SYMBOLS = [
    ("°", "^\\circ"),
    ("±", "\\pm"),
    ("×", "\\times"),
    ("÷", "\\div"),
    ("µ", "\\mu"),
    ("¬", "\\neg"),
    ("¹", "^1"),
    ("²", "^2"),
    ("³", "^3"),
    ("¼", "\\frac{1}{4}"),
    ("½", "\\frac{1}{2}"),
    ("¾", "\\frac{3}{4}"),
]

# (character, quote digraph letter)
GERMAN_DIGRAPHS = [
    ("ä", "a"),
    ("Ä", "A"),
    ("ö", "o"),
    ("Ö", "O"),
    ("ü", "u"),
    ("Ü", "U"),
    ("ß", "s"),
]

# Whitespace TeX swallows after a control word: spaces, at most one newline
CONTROL_WORD_SPACE = r"(?:[ \t]+\n?|\n)[ \t]*"

# A control word ends at the first non-letter
CONTROL_WORD_END = r"(?![a-zA-Z])"


# ────────────────────────── helpers ────────────────────────── #


def escape_template(text: str) -> str:
    """Escape backslashes so ``text`` is inserted verbatim by re templates."""
    return text.replace("\\", "\\\\")


def literal(source: str, target: str) -> tuple[str, str]:
    """
    Build a rule pair replacing the literal ``source`` with ``target``.

    Args:
        source: Literal text to find
        target: Literal replacement text

    Returns:
        (pattern, replacement) pair with regex and template escaping applied
    """
    return re.escape(source), escape_template(target)


def tex_accent_macro(accent: str, base: str) -> str:
    """Return the bare TeX spelling of an accented letter, e.g. ``\\"a``."""
    return f"\\{accent}{base}"


def tex_encoding(char: str) -> str:
    """
    Return the braced TeX spelling used when writing ``char``.

    Raises:
        KeyError: If ``char`` is outside the TeX repertoire
    """
    for accented, accent, base in TEX_ACCENTED:
        if accented == char:
            return "{" + tex_accent_macro(accent, base) + "}"
    for word_char, word in TEX_CONTROL_WORDS:
        if word_char == char:
            return "{\\" + word + "}"
    for cedilla_char, base in TEX_CEDILLAS:
        if cedilla_char == char:
            return "{\\c " + base + "}"
    for ligature_char, ligature in TEX_LIGATURES:
        if ligature_char == char:
            return "{" + ligature + "}"
    for symbol_char, command in TEX_MATH_SYMBOLS:
        if symbol_char == char:
            return "{$" + command + "$}"
    raise KeyError(char)


def tex_decoding_pairs() -> list[tuple[str, str]]:
    """
    Build the ordered TeX to Latin-1 rule pairs.

    The order is load-bearing and must not be changed:

    1. braced forms (``{\\"a}``, ``{\\ss}``), which contain the bare forms
    2. argument forms (``\\"{a}``, ``\\ss{}``, ``\\"\\i{}``) and ``$\\pm$`` math
    3. control words followed by whitespace, which TeX swallows
    4. bare control words (``\\ss``, ``\\"\\i``) that end at a non-letter
    5. bare accents on plain letters (``\\"a``) and ligatures

    Step 3 must precede step 4, otherwise the whitespace after a control
    word survives the conversion.
    """
    braced: list[tuple[str, str]] = []
    argument: list[tuple[str, str]] = []
    word_space: list[tuple[str, str]] = []
    word_bare: list[tuple[str, str]] = []
    letter_bare: list[tuple[str, str]] = []

    for char, accent, base in TEX_ACCENTED:
        bases = [base]
        if base == "\\i":
            # A dotted i under an accent is common in hand-written TeX
            bases.append("i")
        for spelling in bases:
            macro = tex_accent_macro(accent, spelling)
            braced.append(literal("{" + macro + "}", char))
            argument.append(literal(f"\\{accent}{{{spelling}}}", char))
            if spelling.startswith("\\"):
                pattern, replacement = literal(macro, char)
                argument.append((pattern + r"\{\}", replacement))
                word_space.append((pattern + CONTROL_WORD_SPACE, replacement))
                word_bare.append((pattern + CONTROL_WORD_END, replacement))
            else:
                letter_bare.append(literal(macro, char))

    for char, word in TEX_CONTROL_WORDS:
        pattern, replacement = literal("\\" + word, char)
        braced.append(literal("{\\" + word + "}", char))
        argument.append((pattern + r"\{\}", replacement))
        word_space.append((pattern + CONTROL_WORD_SPACE, replacement))
        word_bare.append((pattern + CONTROL_WORD_END, replacement))

    for char, base in TEX_CEDILLAS:
        braced.append(literal("{\\c " + base + "}", char))
        braced.append(literal("{\\c{" + base + "}}", char))
        argument.append(literal("\\c{" + base + "}", char))
        letter_bare.append(literal("\\c " + base, char))

    for char, ligature in TEX_LIGATURES:
        braced.append(literal("{" + ligature + "}", char))
        letter_bare.append(literal(ligature, char))

    for char, command in TEX_MATH_SYMBOLS:
        braced.append(literal("{$" + command + "$}", char))
        argument.append(literal("$" + command + "$", char))

    return braced + argument + word_space + word_bare + letter_bare
