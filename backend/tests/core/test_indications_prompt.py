"""Indications prompt tests — pure tests for build_indications_prompt.

Tests cover:
    - Both texts embedded verbatim, original before final
    - No escaping of braces, quotes, backticks or markup
    - Deterministic output
    - Fixed ruleset content (glossary verbs/nouns, worked examples) present
"""

import pytest

from app.core.indications_prompt import INSTRUCTIONS_ES, build_indications_prompt


def test_embeds_both_texts_verbatim():
    prompt = build_indications_prompt("texto uno", "texto dos")
    assert "texto uno" in prompt
    assert "texto dos" in prompt


def test_original_precedes_final():
    prompt = build_indications_prompt("AAA-original", "ZZZ-final")
    assert prompt.index("**Texto Original:**") < prompt.index("AAA-original")
    assert prompt.index("AAA-original") < prompt.index("**Texto Final:**")
    assert prompt.index("**Texto Final:**") < prompt.index("ZZZ-final")


@pytest.mark.parametrize("text", [
    "{original_text} y {final_text}",
    "{0} {} {{doble}}",
    'comillas "dobles" y \'simples\'',
    "```\nbloque\n```",
    "<script>alert(1)</script>",
    "  espacios al borde  \n",
    "",
])
def test_special_characters_are_not_escaped(text):
    prompt = build_indications_prompt(text, "final")
    assert f"```\n{text}\n```" in prompt


def test_placeholder_lookalikes_in_original_do_not_pull_final():
    prompt = build_indications_prompt("{final_text}", "SECRETO")
    assert prompt.count("SECRETO") == 1
    assert "```\n{final_text}\n```" in prompt


def test_is_deterministic():
    assert build_indications_prompt("a", "b") == build_indications_prompt("a", "b")


def test_starts_with_ruleset():
    prompt = build_indications_prompt("a", "b")
    assert prompt.startswith(INSTRUCTIONS_ES)


def test_ends_with_generation_request():
    prompt = build_indications_prompt("a", "b")
    assert prompt.rstrip().endswith(
        'Ahora, genera la "Propuesta de Indicaciones" con la máxima precisión.'
    )


@pytest.mark.parametrize("verb", [
    "reemplázase / sustitúyese",
    "incorpórase / agrégase / añádese",
    "suprímese / elimínase",
    "intercálese",
    "modifícase",
])
def test_glossary_lists_action_verbs(verb):
    assert verb in INSTRUCTIONS_ES


@pytest.mark.parametrize("noun", [
    "la expresión", "la frase", "la oración", "la palabra / el vocablo", "el inciso",
])
def test_glossary_lists_text_units(noun):
    assert f"**{noun}:**" in INSTRUCTIONS_ES


def test_contains_three_worked_examples():
    assert INSTRUCTIONS_ES.count("Para modificar el artículo en el siguiente sentido:") == 3
    assert "Ejemplo de Sustitución" in INSTRUCTIONS_ES
    assert "Ejemplo de Eliminación Parcial" in INSTRUCTIONS_ES
    assert "Ejemplo de Reemplazo de Párrafo Completo" in INSTRUCTIONS_ES


def test_role_targets_chilean_law():
    assert "redacción de leyes en Chile" in INSTRUCTIONS_ES
