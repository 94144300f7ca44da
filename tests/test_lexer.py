import pytest

from saplex.diagnostics import LexError
from saplex.lexer import (
    START_OF_BATTLE,
    ActionKind,
    EndOfText,
    Entity,
    EntityKind,
    Lexer,
    LogicKind,
    Numeric,
    NumericKind,
    PositionKind,
    TargetKind,
    Token,
    describe_token_type,
    dump_tokens,
    token_text,
    tokenize,
)
from tests._debug import debug_dump_tokens


def lex(name: str, text: str) -> list[Token]:
    tokens = tokenize(text)
    debug_dump_tokens(name, text, tokens)
    return tokens


def summary(tokens: list[Token]) -> list[tuple[object, str, tuple[int, int]]]:
    return [(token.ttype, token.text, token.span.as_tuple()) for token in tokens]


def ttypes(tokens: list[Token]) -> list[object]:
    return [token.ttype for token in tokens]


def test_signed_attributes_with_spans() -> None:
    tokens = lex("signed_attributes", "Gain +3 attack and +2 health.")

    assert summary(tokens) == [
        (ActionKind.GAIN, "Gain", (0, 4)),
        (Entity(EntityKind.ATTACK, 3), "+3 attack", (5, 14)),
        (LogicKind.AND, "and", (15, 18)),
        (Entity(EntityKind.HEALTH, 2), "+2 health", (19, 28)),
        (EndOfText.END, "", (29, 29)),
    ]


def test_signed_percent_attributes() -> None:
    tokens = lex("signed_percent", "+100% health and +120% attack")

    assert summary(tokens) == [
        (Entity(EntityKind.HEALTH_PERCENT, 100.0), "+100% health", (0, 12)),
        (LogicKind.AND, "and", (13, 16)),
        (Entity(EntityKind.ATTACK_PERCENT, 120.0), "+120% attack", (17, 29)),
        (EndOfText.END, "", (29, 29)),
    ]


def test_negative_sign_keeps_value_sign() -> None:
    tokens = lex("negative_sign", "Take -1 health")

    assert tokens[1].ttype == Entity(EntityKind.HEALTH, -1)
    assert tokens[1].text == "-1 health"


def test_summon_stats_shorthand() -> None:
    tokens = lex("summon_stats", "12/13")

    assert summary(tokens) == [
        (Entity(EntityKind.ATTACK, 12), "12", (0, 2)),
        (Entity(EntityKind.HEALTH, 13), "13", (3, 5)),
        (EndOfText.END, "", (5, 5)),
    ]


@pytest.mark.parametrize("text", ["12/", "12/a"])
def test_summon_stats_without_health_is_error(text: str) -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize(text)

    assert excinfo.value.code == "LEXER_MALFORMED_NUMBER"
    assert excinfo.value.reason == "No health after summon stats '/'."


def test_numeral_attached_with_dash() -> None:
    tokens = lex("numeral_dash", "1-gold")

    assert summary(tokens) == [
        (Entity(EntityKind.GOLD, 1), "1-gold", (0, 6)),
        (EndOfText.END, "", (6, 6)),
    ]


def test_numeral_attaches_to_entity_and_multiplier_words() -> None:
    assert ttypes(lex("numeral_damage", "Deal 2 damage"))[1] == Entity(EntityKind.DAMAGE, 2)
    assert ttypes(lex("numeral_times", "2 times"))[0] == Numeric(NumericKind.MULTIPLIER, 2)


def test_numeral_percent_attaches_percent_variant() -> None:
    tokens = lex("numeral_percent", "50% attack")

    assert summary(tokens)[0] == (Entity(EntityKind.ATTACK_PERCENT, 50.0), "50% attack", (0, 10))


def test_unresolved_numeral_word_is_scanned_again() -> None:
    tokens = lex("numeral_fallback", "3 and")

    assert summary(tokens) == [
        (Numeric(NumericKind.NUMBER, 3), "3", (0, 1)),
        (LogicKind.AND, "and", (2, 5)),
        (EndOfText.END, "", (5, 5)),
    ]


def test_unresolved_percent_word_yields_percent() -> None:
    tokens = lex("percent_fallback", "50% of")

    assert summary(tokens) == [
        (Numeric(NumericKind.PERCENT, 50.0), "50%", (0, 3)),
        (EndOfText.END, "", (6, 6)),
    ]


def test_pet_with_attribute_tag() -> None:
    tokens = lex("pet_attribute", "If a random Strawberry pet, gain +2 attack.")

    assert summary(tokens) == [
        (LogicKind.IF, "If", (0, 2)),
        (PositionKind.ANY, "random", (5, 11)),
        (Entity.pet(attr="Strawberry"), "Strawberry pet", (12, 26)),
        (ActionKind.GAIN, "gain", (28, 32)),
        (Entity(EntityKind.ATTACK, 2), "+2 attack", (33, 42)),
        (EndOfText.END, "", (43, 43)),
    ]


def test_pet_with_food_name() -> None:
    tokens = lex("pet_with_food", "Summon one 5/5 Bus with Chili.")

    assert summary(tokens) == [
        (ActionKind.SUMMON, "Summon", (0, 6)),
        (Numeric(NumericKind.NUMBER, 1), "one", (7, 10)),
        (Entity(EntityKind.ATTACK, 5), "5", (11, 12)),
        (Entity(EntityKind.HEALTH, 5), "5", (13, 14)),
        (Entity.pet("Bus"), "Bus", (15, 18)),
        (LogicKind.WITH, "with", (19, 23)),
        (Entity.food("Chili"), "Chili", (24, 29)),
        (EndOfText.END, "", (30, 30)),
    ]


def test_three_word_perk_name() -> None:
    tokens = lex("perk_name", "Gain Fortune Cookie Perk")

    assert summary(tokens) == [
        (ActionKind.GAIN, "Gain", (0, 4)),
        (Entity.food("Fortune Cookie Perk"), "Fortune Cookie Perk", (5, 24)),
        (EndOfText.END, "", (24, 24)),
    ]


def test_name_at_start_of_text_is_not_recognized() -> None:
    tokens = lex("front_name", "Beluga Sturgeon")

    assert summary(tokens) == [
        (Entity.pet("Sturgeon"), "Sturgeon", (7, 15)),
        (EndOfText.END, "", (15, 15)),
    ]


def test_multi_word_name_stops_at_lowercase_word() -> None:
    tokens = lex("multi_word_name", "Summon one 1/1 Dirty Rat up front for the opponent.")

    assert ttypes(tokens) == [
        ActionKind.SUMMON,
        Numeric(NumericKind.NUMBER, 1),
        Entity(EntityKind.ATTACK, 1),
        Entity(EntityKind.HEALTH, 1),
        Entity.pet("Dirty Rat"),
        PositionKind.RIGHT_MOST,
        TargetKind.ENEMY,
        EndOfText.END,
    ]


def test_capitalized_keyword_keeps_its_meaning() -> None:
    tokens = lex("capitalized_keyword", "Deal 2 damage. Gain +1 attack.")

    assert ttypes(tokens)[2] == ActionKind.GAIN


def test_capitalized_keyword_is_not_a_pet_attribute() -> None:
    tokens = lex("keyword_then_friends", "Gain +1 attack. Give friends +1 attack")

    assert ttypes(tokens) == [
        ActionKind.GAIN,
        Entity(EntityKind.ATTACK, 1),
        ActionKind.GIVE,
        TargetKind.FRIEND,
        Entity(EntityKind.ATTACK, 1),
        EndOfText.END,
    ]


def test_capitalized_keyword_inside_sentence_is_pet_attribute() -> None:
    tokens = lex("faint_pet", "Give a random Faint pet +1 attack.")

    assert summary(tokens) == [
        (ActionKind.GIVE, "Give", (0, 4)),
        (PositionKind.ANY, "random", (7, 13)),
        (Entity.pet(attr="Faint"), "Faint pet", (14, 23)),
        (Entity(EntityKind.ATTACK, 1), "+1 attack", (24, 33)),
        (EndOfText.END, "", (34, 34)),
    ]


def test_entity_word_absorbs_following_digits() -> None:
    tokens = lex("level_digits", "If this has a level 3 friend")

    assert summary(tokens) == [
        (LogicKind.IF, "If", (0, 2)),
        (LogicKind.HAVE, "this has", (3, 11)),
        (Entity(EntityKind.LEVEL, 3), "level 3", (14, 21)),
        (TargetKind.FRIEND, "friend", (22, 28)),
        (EndOfText.END, "", (28, 28)),
    ]


def test_numeric_word_leaves_digits_for_summon_stats() -> None:
    tokens = lex("numeric_word_digits", "one 2/3")

    assert ttypes(tokens)[:3] == [
        Numeric(NumericKind.NUMBER, 1),
        Entity(EntityKind.ATTACK, 2),
        Entity(EntityKind.HEALTH, 3),
    ]


def test_this_without_have_is_self() -> None:
    tokens = lex("this_self", "Give this +1 attack")

    assert ttypes(tokens)[1] == PositionKind.SELF
    assert tokens[1].text == "this"


def test_for_each_idiom() -> None:
    tokens = lex("for_each", "Gain +1 attack for each friend")

    assert tokens[2].ttype == LogicKind.FOR_EACH
    assert tokens[2].text == "for each"
    assert tokens[3].ttype == TargetKind.FRIEND


def test_lone_for_is_dropped() -> None:
    tokens = lex("lone_for", "for the opponent")

    assert ttypes(tokens) == [TargetKind.ENEMY, EndOfText.END]


def test_start_of_battle_ability_idiom() -> None:
    tokens = lex("start_of_battle_ability", "Copy a random Start of battle ability")

    assert tokens[2].ttype == Entity(EntityKind.ABILITY, name=START_OF_BATTLE)
    assert tokens[2].text == "Start of battle ability"


def test_start_of_battle_trigger_is_not_collapsed() -> None:
    tokens = lex("start_of_battle", "Start of battle")

    assert ttypes(tokens) == [LogicKind.START, Entity(EntityKind.BATTLE), EndOfText.END]


def test_word_numbers_and_plural_targets() -> None:
    tokens = lex("word_numbers", "Two friends faint")

    assert ttypes(tokens) == [
        Numeric(NumericKind.NUMBER, 2),
        TargetKind.FRIEND,
        ActionKind.FAINT,
        EndOfText.END,
    ]


def test_newline_increments_line() -> None:
    tokens = lex("newline", "Gain +1 attack.\nGive it +1 health.")

    give = next(token for token in tokens if token.ttype == ActionKind.GIVE)
    assert give.span.line == 2
    assert tokens[-1].span.line == 2


def test_invalid_character_is_error() -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize("Gain $3")

    assert excinfo.value.code == "LEXER_INVALID_CHARACTER"
    assert excinfo.value.character == "$"
    assert excinfo.value.cursor.current == 6


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("+ attack", "LEXER_MALFORMED_NUMBER"),
        ("+3", "LEXER_MALFORMED_NUMBER"),
        ("+3x", "LEXER_MALFORMED_NUMBER"),
        ("+3 banana", "LEXER_MISSING_ATTRIBUTE"),
        ("+3 pet", "LEXER_MISSING_ATTRIBUTE"),
        ("+50% level", "LEXER_NO_PERCENT_VARIANT"),
        ("50% tier", "LEXER_NO_PERCENT_VARIANT"),
    ],
)
def test_malformed_numbers_are_errors(text: str, code: str) -> None:
    with pytest.raises(LexError) as excinfo:
        tokenize(text)

    assert excinfo.value.code == code
    assert excinfo.value.diagnostic.category == "lexer"


def test_unknown_lowercase_words_are_dropped() -> None:
    assert ttypes(lex("dropped", "a the of")) == [EndOfText.END]


def test_empty_text_is_only_end() -> None:
    tokens = tokenize("")

    assert len(tokens) == 1
    assert tokens[0].is_end
    assert token_text(tokens[0]) == ""
    assert token_text(tokens[0], null_char_on_end=True) == "\0"


def test_tokenize_is_deterministic() -> None:
    text = "If this has a level 3 friend, gain +1 attack and +2 health."

    assert tokenize(text) == tokenize(text)


def test_lexer_lex_is_idempotent() -> None:
    lexer = Lexer("Gain +1 attack")

    first = lexer.lex()
    assert lexer.lex() == first
    assert sum(1 for token in first if token.is_end) == 1


def test_dump_tokens_prints_one_line_per_token(capsys: pytest.CaptureFixture[str]) -> None:
    dump_tokens(tokenize("Gain +1 attack"), diagnostics=[])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("000 ACTION")
    assert "ATTACK(value=1)" in lines[1]
    assert "text='+1 attack'" in lines[1]
    assert lines[2].startswith("002 END")
    assert lines[-1] == "Diagnostics:"


def test_describe_token_type() -> None:
    assert describe_token_type(Numeric(NumericKind.MULTIPLIER)) == "MULTIPLIER"
    assert describe_token_type(Numeric(NumericKind.NUMBER, 2)) == "NUMBER(2)"
    assert describe_token_type(Entity.pet("Dirty Rat")) == "PET(name='Dirty Rat')"
    assert describe_token_type(PositionKind.SELF) == "SELF"
