# =============================================================================
# test_symbols.py - Label and Variable Pass Tests
# =============================================================================
# Tests for the first two assembler passes:
#   - label resolution (instruction indices, first declaration wins)
#   - variable allocation (base address, first-occurrence order)
# =============================================================================

import pytest

from hack_asm.assembler.preprocessor import SourceLine, preprocess
from hack_asm.assembler.symbols import (
    allocate_variables,
    is_literal,
    label_key,
    resolve_labels,
)


# =============================================================================
# Helpers
# =============================================================================

class TestHelpers:
    """Test line classification helpers."""

    @pytest.mark.parametrize("operand", ["0", "7", "32767", "0010"])
    def test_is_literal(self, operand):
        assert is_literal(operand)

    @pytest.mark.parametrize("operand", ["", "x", "1x", "-1", "0x10", "1e3", " 1", "١٢"])
    def test_is_not_literal(self, operand):
        assert not is_literal(operand)

    def test_label_key(self):
        assert label_key("LOOP") == "(LOOP)"


# =============================================================================
# Label Resolution
# =============================================================================

class TestResolveLabels:
    """Test pass 1: label table construction."""

    def test_label_at_start(self):
        """(LOOP) followed by @LOOP resolves to index 0."""
        assert dict(resolve_labels(["(LOOP)", "@LOOP"])) == {"(LOOP)": 0}

    def test_labels_not_counted(self):
        """Label lines do not advance the instruction counter."""
        lines = ["@0", "(A)", "(B)", "D=A", "(C)", "0;JMP"]
        assert dict(resolve_labels(lines)) == {"(A)": 1, "(B)": 1, "(C)": 2}

    def test_trailing_label(self):
        """A label at the end points one past the last instruction."""
        assert resolve_labels(["@1", "D=A", "(END)"])["(END)"] == 2

    def test_first_declaration_wins(self):
        lines = ["(X)", "@1", "(X)", "@2"]
        assert dict(resolve_labels(lines)) == {"(X)": 0}

    def test_malformed_label_kept_verbatim(self):
        """A label missing its closing delimiter is stored as written."""
        assert dict(resolve_labels(["@1", "(LOOP"])) == {"(LOOP": 1}

    def test_blank_lines_not_counted(self):
        assert dict(resolve_labels(["@1", "", "  ", "(X)"])) == {"(X)": 1}

    def test_lines_are_trimmed(self):
        assert dict(resolve_labels(["  @1  ", "  (X)  "])) == {"(X)": 1}

    def test_accepts_source_lines(self, max_source):
        labels = resolve_labels(preprocess(max_source))
        assert dict(labels) == {
            "(OUTPUT_FIRST)": 10,
            "(OUTPUT_D)": 12,
            "(INFINITE_LOOP)": 14,
        }

    def test_no_labels(self):
        assert dict(resolve_labels(["@1", "D=A"])) == {}

    def test_result_is_read_only(self):
        labels = resolve_labels(["(X)"])
        with pytest.raises(TypeError):
            labels["(Y)"] = 3


# =============================================================================
# Variable Allocation
# =============================================================================

class TestAllocateVariables:
    """Test pass 2: variable table construction."""

    def test_first_occurrence_order(self):
        """@foo, @bar, @foo -> foo=16, bar=17."""
        lines = ["@foo", "@bar", "@foo"]
        assert dict(allocate_variables(lines, {})) == {"foo": 16, "bar": 17}

    def test_skips_literals(self):
        assert dict(allocate_variables(["@5", "@x"], {})) == {"x": 16}

    def test_skips_predefined_symbols(self):
        lines = ["@R3", "@SCREEN", "@KBD", "@SP", "@THAT", "@i"]
        assert dict(allocate_variables(lines, {})) == {"i": 16}

    def test_skips_labels(self):
        """A name declared as a label anywhere is never a variable."""
        lines = ["@LOOP", "@n", "(LOOP)", "@LOOP"]
        labels = resolve_labels(lines)
        assert dict(allocate_variables(lines, labels)) == {"n": 16}

    def test_ignores_compute_and_label_lines(self):
        lines = ["D=M", "(foo)", "0;JMP"]
        assert dict(allocate_variables(lines, {})) == {}

    def test_custom_base(self):
        lines = ["@a", "@b"]
        assert dict(allocate_variables(lines, {}, base=1024)) == {"a": 1024, "b": 1025}

    def test_names_are_case_sensitive(self):
        lines = ["@sum", "@SUM", "@r0"]
        assert dict(allocate_variables(lines, {})) == {"sum": 16, "SUM": 17, "r0": 18}

    def test_empty_operand_not_allocated(self):
        assert dict(allocate_variables(["@"], {})) == {}

    def test_malformed_label_does_not_hide_variable(self):
        """'(LOOP' is not the key '(LOOP)', so @LOOP becomes a variable."""
        lines = ["(LOOP", "@LOOP"]
        labels = resolve_labels(lines)
        assert dict(allocate_variables(lines, labels)) == {"LOOP": 16}

    def test_deterministic(self):
        lines = [SourceLine(f"@v{n % 7}", n + 1) for n in range(50)]
        first = allocate_variables(lines, {})
        second = allocate_variables(lines, {})
        assert list(first.items()) == list(second.items())
        assert list(first) == [f"v{n}" for n in range(7)]
