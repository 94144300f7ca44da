import pytest

from saplex.diagnostics import TriggerSyntaxError
from saplex.lexer import ActionKind, Entity, EntityKind, LogicKind, PositionKind, TargetKind, tokenize
from saplex.parser import EffectTrigger, TokenStream, build_triggers, fold_sub_trigger, parse_triggers
from saplex.parser.trigger import START_OF_BATTLE_ABILITY
from tests._debug import debug_dump_records, debug_dump_tokens


def triggers_of(name: str, text: str) -> list[EffectTrigger]:
    tokens = tokenize(text)
    debug_dump_tokens(name, text, tokens)
    triggers = parse_triggers(tokens)
    debug_dump_records(name, triggers)
    return triggers


def test_positional_trigger() -> None:
    assert triggers_of("positional", "Friend ahead faints") == [
        EffectTrigger(
            action=ActionKind.FAINT,
            target=TargetKind.FRIEND,
            prim_pos=PositionKind.AHEAD,
        )
    ]


def test_numeric_trigger() -> None:
    assert triggers_of("numeric", "Two friends faint") == [
        EffectTrigger(action=ActionKind.FAINT, number=2, target=TargetKind.FRIEND)
    ]


def test_logic_and_entity_trigger() -> None:
    assert triggers_of("after_attack", "After attack") == [
        EffectTrigger(entity=Entity(EntityKind.ATTACK), logic=LogicKind.AFTER)
    ]


def test_start_of_battle_trigger() -> None:
    assert triggers_of("start_of_battle", "Start of battle") == [
        EffectTrigger(entity=Entity(EntityKind.BATTLE), logic=LogicKind.START)
    ]


def test_split_triggers_inherit_action() -> None:
    expected = [
        EffectTrigger(action=ActionKind.GAIN, entity=Entity(EntityKind.PERK)),
        EffectTrigger(action=ActionKind.GAIN, entity=Entity(EntityKind.AILMENT)),
    ]

    assert triggers_of("short_split", "Gain perk or ailment") == expected
    assert triggers_of("verbose_split", "Gain perk or gain ailment") == expected


def test_split_triggers_without_action() -> None:
    assert triggers_of("after_or_before", "After attack or before attack") == [
        EffectTrigger(entity=Entity(EntityKind.ATTACK), logic=LogicKind.AFTER),
        EffectTrigger(entity=Entity(EntityKind.ATTACK), logic=LogicKind.BEFORE),
    ]


def test_entity_value_sets_number() -> None:
    (trigger,) = triggers_of("level_friend", "Level 3 friend")

    assert trigger.entity == Entity(EntityKind.LEVEL, 3)
    assert trigger.number == 3
    assert trigger.target == TargetKind.FRIEND


def test_shop_action_forces_shop_target() -> None:
    (trigger,) = triggers_of("buy_food", "Buy food")

    assert trigger.action == ActionKind.BUY
    assert trigger.entity == Entity(EntityKind.FOOD)
    assert trigger.target == TargetKind.SHOP


def test_second_position_fills_sec_pos() -> None:
    (trigger,) = triggers_of("two_positions", "Adjacent friend ahead hurt")

    assert trigger.prim_pos == PositionKind.ADJACENT
    assert trigger.sec_pos == PositionKind.AHEAD
    assert trigger.action == ActionKind.HURT


def test_later_position_overwrites_sec_pos() -> None:
    (trigger,) = triggers_of("three_positions", "Adjacent friend ahead behind hurt")

    assert trigger.prim_pos == PositionKind.ADJACENT
    assert trigger.sec_pos == PositionKind.BEHIND


@pytest.mark.parametrize("text", ["Friend ahead faints or", "and."])
def test_dangling_connective_is_error(text: str) -> None:
    with pytest.raises(TriggerSyntaxError, match="without an associated value") as excinfo:
        build_triggers(tokenize(text))

    assert excinfo.value.code == "PARSER_DANGLING_CONNECTIVE"
    assert excinfo.value.diagnostic.span is not None


def test_empty_trigger_text() -> None:
    (trigger,) = build_triggers(tokenize(""))

    assert trigger.is_empty


def test_fold_sub_trigger_collapses_start_of_battle_ability() -> None:
    stream = TokenStream(tokenize("If start battle ability, gain +1 attack."))

    trigger = fold_sub_trigger(stream, lambda token: token.is_action)

    assert trigger.entity == START_OF_BATTLE_ABILITY
    assert trigger.logic == LogicKind.IF
    assert stream.current.ttype == ActionKind.GAIN


def test_fold_sub_trigger_skips_connectives() -> None:
    stream = TokenStream(tokenize("friend and enemy"))

    trigger = fold_sub_trigger(stream, lambda token: token.is_action, logic=LogicKind.FOR_EACH)

    assert trigger.logic == LogicKind.FOR_EACH
    assert trigger.target == TargetKind.ENEMY
    assert stream.at_end


def test_fold_sub_trigger_stops_before_connective_and_action() -> None:
    stream = TokenStream(tokenize("friend and give it +1 health"))

    trigger = fold_sub_trigger(stream, lambda token: token.is_logic(LogicKind.TO))

    assert trigger == EffectTrigger(target=TargetKind.FRIEND)
    assert stream.current.ttype == LogicKind.AND
    assert stream.nth(1).ttype == ActionKind.GIVE
