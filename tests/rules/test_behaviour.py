"""Tests for NoForbiddenCallsRule and NoGenericExceptionsRule."""

import pytest

from archguard.domain.exceptions import RuleConfigurationError
from archguard.domain.models import Declaration, DeclarationKind
from archguard.rules import NoForbiddenCallsRule, NoGenericExceptionsRule


def method(calls=(), raises=()) -> Declaration:
    return Declaration(
        name="com.conference.logging.InboundAccessLog.ruleBreakerMethod",
        namespace_path=("com", "conference", "logging"),
        parameter_count=0,
        calls=frozenset(calls),
        raises=frozenset(raises),
    )


class TestNoForbiddenCallsRule:
    """Standard stream access."""

    def test_print_reported(self):
        violation = NoForbiddenCallsRule().evaluate(method(calls={"print", "len"}))

        assert violation is not None
        assert violation.rule_id == "no-forbidden-calls"
        assert "print" in violation.reason
        assert "len" not in violation.reason

    def test_stream_attribute_calls_reported(self):
        violation = NoForbiddenCallsRule().evaluate(
            method(calls={"sys.stderr.write", "sys.stdout.flush"})
        )
        assert "sys.stderr.write, sys.stdout.flush" in violation.reason

    def test_similar_names_not_reported(self):
        """sys.stdout_proxy is not sys.stdout; printer is not print."""
        rule = NoForbiddenCallsRule()
        assert rule.evaluate(method(calls={"sys.stdout_proxy.write", "printer"})) is None

    def test_logger_calls_pass(self):
        assert NoForbiddenCallsRule().evaluate(method(calls={"logger.info"})) is None

    def test_class_declaration_passes(self):
        declaration = Declaration(
            name="a.Thing", namespace_path=("a",), kind=DeclarationKind.CLASS
        )
        assert NoForbiddenCallsRule().evaluate(declaration) is None

    def test_custom_forbidden_list(self):
        rule = NoForbiddenCallsRule(forbidden=["os.system"], rule_id="no-shell")
        violation = rule.evaluate(method(calls={"os.system", "print"}))

        assert violation.rule_id == "no-shell"
        assert "os.system" in violation.reason
        assert "print" not in violation.reason

    def test_empty_forbidden_list_rejected(self):
        with pytest.raises(RuleConfigurationError):
            NoForbiddenCallsRule(forbidden=[])


class TestNoGenericExceptionsRule:
    """Generic exception types."""

    @pytest.mark.parametrize(
        "raised", ["Exception", "BaseException", "RuntimeError", "builtins.Exception"]
    )
    def test_generic_reported(self, raised):
        violation = NoGenericExceptionsRule().evaluate(method(raises={raised}))

        assert violation is not None
        assert raised in violation.reason

    def test_specific_exception_passes(self):
        rule = NoGenericExceptionsRule()
        assert rule.evaluate(method(raises={"ValueError", "errors.TicketSoldOut"})) is None

    def test_qualified_custom_exception_named_exception_passes(self):
        """A project type called pkg.Exception is not the builtin."""
        assert NoGenericExceptionsRule().evaluate(method(raises={"pkg.Exception"})) is None
