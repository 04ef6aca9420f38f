"""Tests for mapper error types."""

import pytest
from rpl_mappers.errors import ArityError, MapperError, MapperTruthError, OperandTypeError


class TestArityError:
    def test_attributes(self):
        err = ArityError(3, 1)
        assert err.required == 3
        assert err.given == 1
        assert err.expr is None
        assert str(err) == 'Mapper needs at least 3 argument(s), got 1'

    def test_with_expression(self):
        err = ArityError(2, 0, '_2')
        assert str(err) == '_2: Mapper needs at least 2 argument(s), got 0'

    def test_is_type_error(self):
        assert isinstance(ArityError(1, 0), TypeError)
        assert isinstance(ArityError(1, 0), MapperError)


class TestOperandTypeError:
    def test_message(self):
        err = OperandTypeError('+', str, int)
        assert err.op == '+'
        assert err.operand_types == (str, int)
        assert str(err) == "Unsupported operand type(s) for '+': str, int"

    def test_catchable_as_type_error(self):
        with pytest.raises(TypeError):
            raise OperandTypeError('-', str)


class TestMapperTruthError:
    def test_message_names_alternatives(self):
        err = MapperTruthError('(_1 > val(0))')
        assert str(err).startswith('(_1 > val(0)): Mapper has no truth value')
        assert 'logical_and()' in str(err)

    def test_without_expression(self):
        assert str(MapperTruthError()).startswith('Mapper has no truth value')
