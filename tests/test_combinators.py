"""Tests for sequence, ordered choice, delimited lists and the engine plumbing."""

import pytest

from parsnip.ast import Number, Pair, Sequence, String
from parsnip.errors import GrammarError, SyntaxMismatch
from parsnip.jsonish.grammar import JSON_GRAMMAR, VALUE_RULES
from parsnip.numbers import INTEGER
from parsnip.peg import (
    Choice, Delimited, Literal, PegGrammar, PegRunner, Ref, RuleDef, Seq, parse,
)


# ---------------------------------------------------------------------------
# Seq
# ---------------------------------------------------------------------------

class TestSeq:
    def test_whitespace_between_items(self):
        expr = Seq((Literal("a"), INTEGER, Literal("b")))
        assert parse(expr, "a 12\n b!") == ("!", Sequence([Number(12)]))

    def test_no_leading_whitespace(self):
        with pytest.raises(SyntaxMismatch):
            parse(Seq((Literal("a"),)), " a")

    def test_no_trailing_whitespace(self):
        assert parse(Seq((Literal("a"), Literal("b"))), "a b  ") == ("  ", Sequence([]))

    def test_tight_sequence_rejects_whitespace(self):
        with pytest.raises(SyntaxMismatch):
            parse(Seq((Literal("a"), Literal("b")), skip_ws=False), "a b")

    def test_short_circuits_on_failure(self):
        with pytest.raises(SyntaxMismatch) as ei:
            parse(Seq((Literal("a"), Literal("b"), Literal("c"))), "a x c")
        assert "'b'" in str(ei.value)
        assert ei.value.pos == 2

    def test_pair_then_comma(self):
        runner = PegRunner(JSON_GRAMMAR)
        actual = runner.run_expr(Seq((Ref("pair"), Literal(","))), '"apple":123,')
        assert actual == ("", Sequence([Pair(String("apple"), Number(123))]))


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------

class TestChoice:
    def test_first_success_wins(self):
        assert parse(Choice((Literal("ab"), Literal("a"))), "abc") == ("c", None)
        assert parse(Choice((Literal("a"), Literal("ab"))), "abc") == ("bc", None)

    def test_alternatives_restart_from_original_input(self):
        expr = Choice((
            Seq((Literal("a"), Literal("x"))),
            Seq((Literal("a"), Literal("b"))),
        ))
        assert parse(expr, "ab") == ("", Sequence([]))

    def test_all_fail(self):
        with pytest.raises(SyntaxMismatch) as ei:
            parse(Choice((Literal("a"), Literal("b"))), "zzz")
        assert "none of the options matched at 'zzz'" in str(ei.value)

    def test_expected_label(self):
        with pytest.raises(SyntaxMismatch) as ei:
            parse(Choice((Literal("a"), Literal("b")), expected="a or b"), "zzz")
        assert "expected a or b" in str(ei.value)

    @pytest.mark.parametrize("order", [
        VALUE_RULES,
        tuple(reversed(VALUE_RULES)),
        VALUE_RULES[3:] + VALUE_RULES[:3],
        ("null", "array", "integer", "object", "boolean", "string"),
    ])
    @pytest.mark.parametrize("text", [
        "true", "-12", '"abc"', "[1, [2]]", '{"k": null}', "null",
    ])
    def test_mutually_exclusive_order_is_irrelevant(self, order, text):
        runner = PegRunner(JSON_GRAMMAR)
        expected = runner.run("value", text)
        assert runner.run_expr(Choice(tuple(Ref(n) for n in order)), text) == expected


# ---------------------------------------------------------------------------
# Delimited
# ---------------------------------------------------------------------------

INTS = Delimited(INTEGER, "[", "]")


class TestDelimited:
    def test_elements(self):
        assert parse(INTS, "[1,2,3]") == ("", Sequence([Number(1), Number(2), Number(3)]))

    def test_empty(self):
        assert parse(INTS, "[]") == ("", Sequence([]))

    def test_empty_with_whitespace(self):
        assert parse(INTS, "[ \n ]x") == ("x", Sequence([]))

    def test_whitespace_around_separators(self):
        assert parse(INTS, "[ 1 ,\n 2 ]") == ("", Sequence([Number(1), Number(2)]))

    def test_trailing_separator(self):
        assert parse(INTS, "[1, 2, ]") == ("", Sequence([Number(1), Number(2)]))

    def test_double_trailing_separator(self):
        with pytest.raises(SyntaxMismatch):
            parse(INTS, "[1,,]")

    def test_separator_alone(self):
        with pytest.raises(SyntaxMismatch):
            parse(INTS, "[,]")

    def test_missing_separator(self):
        with pytest.raises(SyntaxMismatch):
            parse(INTS, "[1 2]")

    def test_unclosed(self):
        with pytest.raises(SyntaxMismatch):
            parse(INTS, "[1,2")

    def test_custom_literals(self):
        expr = Delimited(INTEGER, "<", ">", ";")
        assert parse(expr, "<1; 2;>;") == (";", Sequence([Number(1), Number(2)]))

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 17])
    def test_rendered_list_keeps_length_and_order(self, n):
        text = "[" + ",".join(str(i * 3 - 7) for i in range(n)) + "]"
        remaining, frag = parse(INTS, text)
        assert remaining == ""
        assert len(frag) == n
        assert frag == Sequence([Number(i * 3 - 7) for i in range(n)])


# ---------------------------------------------------------------------------
# Grammar / runner
# ---------------------------------------------------------------------------

class TestGrammar:
    def test_undefined_rule(self):
        with pytest.raises(GrammarError):
            PegGrammar.of(RuleDef("a", Ref("b")))

    def test_duplicate_rule(self):
        with pytest.raises(GrammarError):
            PegGrammar.of(RuleDef("a", Literal("x")), RuleDef("a", Literal("y")))

    def test_start_defaults_to_first_rule(self):
        g = PegGrammar.of(RuleDef("a", INTEGER), RuleDef("b", Literal("x")))
        assert g.start == "a"
        assert PegRunner(g).run(None, "7!") == ("!", Number(7))

    def test_grammar_error_is_not_backtracked(self):
        g = PegGrammar(rules={"a": RuleDef("a", Choice((Ref("missing"), Literal("x"))))}, start="a")
        with pytest.raises(GrammarError):
            PegRunner(g).run("a", "x")

    def test_trace(self):
        events = []
        PegRunner(JSON_GRAMMAR, trace=events.append).run("integer", "12")
        assert events == ["enter integer @0", "exit  integer @0..2"]

    def test_trace_failure(self):
        events = []
        with pytest.raises(SyntaxMismatch):
            PegRunner(JSON_GRAMMAR, trace=events.append).run("null", "nil")
        assert events == ["enter null @0", "fail  null @0"]
