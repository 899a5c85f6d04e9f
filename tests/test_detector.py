"""Tests for Stage 1: heuristic issue detection.

- Client-perspective behavior verification
- Given-When-Then structure
"""

import pytest

from code_mentor import detect
from code_mentor.models import Issue, IssueType, Language, RuleKind, Severity
from code_mentor.rules import RULE_BATTERIES, get_battery


FACTORIAL = (
    "def factorial(n):\n"
    "    if n == 1:\n"
    "        return 1\n"
    "    else:\n"
    "        return n * factorial(n - 1)\n"
    "\n"
    "print(factorial(0))"
)


def messages(issues):
    return [issue.message for issue in issues]


class TestFallback:
    """Tests for the success fallback issue."""

    def test_empty_code_in_unbattered_language_returns_success(self):
        """Given empty java code, should return exactly one success issue."""
        # When
        issues = detect("", "java")

        # Then
        assert len(issues) == 1
        assert issues[0].type is IssueType.SUCCESS
        assert issues[0].severity is Severity.NONE
        assert issues[0].message == "No obvious issues detected!"
        assert issues[0].line is None

    def test_javascript_never_reports_issues(self):
        """Given javascript with an obvious infinite loop, should still fall back."""
        issues = detect("while (true) { x = 1 }", "javascript")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    @pytest.mark.parametrize("language", ["rust", "", "PYTHON3", None])
    def test_unknown_language_does_not_raise(self, language):
        """Given an unrecognized language tag, should silently fall back."""
        issues = detect("while True:\n    pass", language)

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    @pytest.mark.parametrize("language", ["Python", " python", "CPP"])
    def test_language_tag_must_match_exactly(self, language):
        """Given a differently cased or padded tag, should fall back like an unknown one."""
        issues = detect("while True:\n    print('go')\nint* p = new int[5];", language)

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_language_enum_accepted(self):
        """Given a Language member, should behave like its string value."""
        assert detect(FACTORIAL, Language.PYTHON) == detect(FACTORIAL, "python")


class TestPythonRules:
    """Tests for the python rule battery."""

    def test_factorial_incomplete_base_case(self):
        """Given factorial with only n == 1, should flag a high logic issue."""
        # When
        issues = detect(FACTORIAL, "python")

        # Then
        assert len(issues) == 1
        issue = issues[0]
        assert issue.message == "Incomplete base case in recursive function"
        assert issue.type is IssueType.LOGIC
        assert issue.severity is Severity.HIGH
        assert issue.kind is RuleKind.INCOMPLETE_BASE_CASE
        assert issue.line == 2

    def test_inclusive_base_case_not_flagged(self):
        """Given a base case using n <= 1, should not flag the base case."""
        code = (
            "def factorial(n):\n    if n <= 1:\n        return 1\n"
            "    if n == 1:\n        return 1\n    return n * factorial(n - 1)"
        )

        issues = detect(code, "python")

        assert "Incomplete base case in recursive function" not in messages(issues)

    def test_equality_check_outside_factorial_not_flagged(self):
        """Given n == 1 in a non-factorial function, should not report a base case."""
        code = "def check(n):\n    if n == 1:\n        print('one')"

        issues = detect(code, "python")

        assert all(i.kind is not RuleKind.INCOMPLETE_BASE_CASE for i in issues)
        assert all(i.severity is not Severity.HIGH for i in issues)

    def test_unindented_line_after_colon(self):
        """Given an unindented body line, should flag an indentation error there."""
        issues = detect("def f():\nreturn 1", "python")

        assert len(issues) == 1
        assert issues[0].message == "Indentation error"
        assert issues[0].type is IssueType.SYNTAX
        assert issues[0].severity is Severity.HIGH
        assert issues[0].line == 2

    def test_indentation_stops_at_first_violation(self):
        """Given two violations, should report only the first."""
        code = "def f():\nreturn 1\ndef g():\nreturn 2"

        issues = detect(code, "python")

        indentation = [i for i in issues if i.kind is RuleKind.INDENTATION]
        assert len(indentation) == 1
        assert indentation[0].line == 2

    def test_indentation_skipped_without_function(self):
        """Given no 'def ', should not run the indentation scan."""
        issues = detect("if x:\nprint(x)", "python")

        assert all(i.kind is not RuleKind.INDENTATION for i in issues)

    def test_infinite_loop_without_break(self):
        """Given while True with no break, should flag a medium logic issue."""
        issues = detect("while True:\n    print('go')", "python")

        assert len(issues) == 1
        assert issues[0].message == "Potential infinite loop"
        assert issues[0].type is IssueType.LOGIC
        assert issues[0].severity is Severity.MEDIUM
        assert issues[0].line == 1

    def test_infinite_loop_with_break_not_flagged(self):
        """Given while True containing a break, should not flag."""
        issues = detect("while True:\n    print('go')\n    break", "python")

        assert "Potential infinite loop" not in messages(issues)

    def test_single_argument_range(self):
        """Given range(n), should add a low concept reminder on that line."""
        issues = detect("print('start')\nfor i in range(n):\n    print(i)", "python")

        assert len(issues) == 1
        assert issues[0].message == "Potential off-by-one error"
        assert issues[0].type is IssueType.CONCEPT
        assert issues[0].severity is Severity.LOW
        assert issues[0].line == 2

    def test_unused_variable(self):
        """Given x assigned once and never read, should flag it by name."""
        issues = detect("x = 5\nprint('hi')", "python")

        assert len(issues) == 1
        assert "'x'" in issues[0].message
        assert issues[0].message == "Variable 'x' is assigned but never used"
        assert issues[0].type is IssueType.STYLE
        assert issues[0].severity is Severity.LOW
        assert issues[0].line == 1

    def test_unused_variables_reported_in_assignment_order(self):
        """Given two unused assignments, should report both in code order."""
        issues = detect("first = 1\nsecond = 2\nprint('done')", "python")

        assert messages(issues) == [
            "Variable 'first' is assigned but never used",
            "Variable 'second' is assigned but never used",
        ]
        assert [i.line for i in issues] == [1, 2]

    def test_used_variable_not_flagged(self):
        """Given a variable read after assignment, should not flag it."""
        issues = detect("total = 5\nprint(total)", "python")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_underscore_placeholder_ignored(self):
        """Given an assignment to _, should not flag it."""
        issues = detect("_ = compute()", "python")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_identifiers_are_ascii_word_characters(self):
        """Given a non-ASCII variable name, should not treat it as an assignment target."""
        issues = detect("café = 1\nprint('menu')", "python")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_non_ascii_neighbour_does_not_hide_usage(self):
        """Given 'x' next to a non-ASCII letter, should count that as a separate use."""
        issues = detect("x = 1\nprint(éx)", "python")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_function_without_return_or_print(self):
        """Given a def with neither return nor print, should flag missing return."""
        issues = detect("def shout(name):\n    name.upper()", "python")

        assert len(issues) == 1
        assert issues[0].message == "Function may not return a value"
        assert issues[0].type is IssueType.LOGIC
        assert issues[0].severity is Severity.MEDIUM
        assert issues[0].line == 1

    def test_battery_order_is_preserved(self):
        """Given code firing several rules, should list them in battery order."""
        code = "while True:\n    for i in range(n):\n        unused = 1"

        issues = detect(code, "python")

        assert [i.kind for i in issues] == [
            RuleKind.INFINITE_LOOP,
            RuleKind.OFF_BY_ONE,
            RuleKind.UNUSED_VARIABLE,
        ]


class TestCFamilyRules:
    """Tests for the C / C++ rule battery."""

    def test_new_without_delete_is_memory_leak(self):
        """Given new with no delete, should flag a high logic leak."""
        issues = detect("int* p = new int[5];", "cpp")

        leaks = [i for i in issues if i.message == "Potential memory leak"]
        assert len(leaks) == 1
        assert leaks[0].type is IssueType.LOGIC
        assert leaks[0].severity is Severity.HIGH
        assert leaks[0].line == 1

    def test_malloc_with_free_not_flagged(self):
        """Given malloc paired with free, should report nothing."""
        issues = detect("int *p = malloc(4);\nfree(p);", "c")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_missing_semicolon_each_line(self):
        """Given a statement line without ';', should flag that line."""
        issues = detect("int x = 5\nint y = 6;", "c")

        assert len(issues) == 1
        assert issues[0].message == "Missing semicolon"
        assert issues[0].type is IssueType.SYNTAX
        assert issues[0].severity is Severity.HIGH
        assert issues[0].line == 1

    def test_control_flow_and_preprocessor_lines_skip_semicolon_check(self):
        """Given directives, comments and loop headers, should not flag them."""
        code = (
            "#include <stdio.h>\n"
            "// entry point\n"
            "for (int i = 0; i < 3; i++)\n"
            "    puts(\"hi\");\n"
        )

        issues = detect(code, "c")

        assert "Missing semicolon" not in messages(issues)

    def test_unguarded_array_access(self):
        """Given indexing with no if/while anywhere, should flag bounds at line 1."""
        issues = detect("int a[10];\nint b = 3;\nb = a[b];", "cpp")

        bounds = [i for i in issues if i.kind is RuleKind.ARRAY_BOUNDS]
        assert len(bounds) == 1
        assert bounds[0].severity is Severity.MEDIUM
        assert bounds[0].line == 1

    def test_guarded_array_access_not_flagged(self):
        """Given an if guard somewhere, should not flag bounds."""
        issues = detect("if (i < 10) {\n    x = a[i];\n}", "c")

        assert all(i.kind is not RuleKind.ARRAY_BOUNDS for i in issues)

    def test_uninitialized_declaration(self):
        """Given 'int x;', should flag an uninitialized variable at line 1."""
        code = "#include <stdio.h>\nint main() {\n    int x;\n    return 0;\n}"

        issues = detect(code, "c")

        assert len(issues) == 1
        assert issues[0].message == "Potentially uninitialized variable"
        assert issues[0].line == 1

    def test_c_and_cpp_share_battery(self):
        """Given the same code, c and cpp should produce the same issues."""
        code = "float ratio;\nint *p = malloc(8);"

        assert detect(code, "c") == detect(code, "cpp")
        assert RULE_BATTERIES[Language.C] is RULE_BATTERIES[Language.CPP]


class TestCSharpRules:
    """Tests for the C# rule battery."""

    def test_member_access_without_null_check(self):
        """Given member access with no if or ?., should flag null reference."""
        issues = detect("var name = person.Name;", "csharp")

        assert len(issues) == 1
        assert issues[0].message == "Potential null reference exception"
        assert issues[0].type is IssueType.LOGIC
        assert issues[0].severity is Severity.MEDIUM
        assert issues[0].line == 1

    def test_null_conditional_not_flagged(self):
        """Given ?. member access, should not flag null reference."""
        issues = detect("var name = person?.Name;", "csharp")

        assert all(i.kind is not RuleKind.NULL_REFERENCE for i in issues)

    def test_stream_reader_without_using(self):
        """Given new StreamReader outside using, should flag disposal."""
        issues = detect("var reader = new StreamReader(path);", "csharp")

        assert len(issues) == 1
        assert issues[0].message == "Resource not properly disposed"
        assert issues[0].type is IssueType.STYLE
        assert issues[0].severity is Severity.MEDIUM

    def test_stream_reader_with_using_not_flagged(self):
        """Given a using block, should report nothing."""
        issues = detect("using (var reader = new StreamReader(path)) { }", "csharp")

        assert [i.type for i in issues] == [IssueType.SUCCESS]

    def test_catch_base_exception(self):
        """Given catch (Exception e), should flag a low style issue on that line."""
        code = "try { Run(); }\ncatch (Exception e) { }"

        issues = detect(code, "csharp")

        assert len(issues) == 1
        assert issues[0].message == "Catching generic Exception"
        assert issues[0].severity is Severity.LOW
        assert issues[0].line == 2


class TestDetectorProperties:
    """Properties that hold across inputs."""

    SNIPPETS = [
        (FACTORIAL, "python"),
        ("def f():\nreturn 1", "python"),
        ("x = 1\ny = 2\nwhile True:\n    range(x)", "python"),
        ("int* p = new int[5]\nint x;", "cpp"),
        ("var s = new FileStream(p);\ncatch (Exception e) {}", "csharp"),
        ("", "python"),
        ("", "c"),
        ("print('ok')", "java"),
    ]

    @pytest.mark.parametrize("code,language", SNIPPETS)
    def test_real_issues_use_real_severities(self, code, language):
        """Given any snippet, non-fallback issues never use success/none."""
        issues = detect(code, language)

        if issues[0].type is IssueType.SUCCESS:
            assert len(issues) == 1
            assert issues[0].severity is Severity.NONE
        else:
            for issue in issues:
                assert issue.type is not IssueType.SUCCESS
                assert issue.severity in (Severity.HIGH, Severity.MEDIUM, Severity.LOW)

    @pytest.mark.parametrize("code,language", SNIPPETS)
    def test_detection_is_deterministic(self, code, language):
        """Given the same input twice, should return identical ordered lists."""
        assert detect(code, language) == detect(code, language)

    def test_issue_records_are_immutable(self):
        """Given a detected issue, should not allow mutation."""
        issue = detect("x = 5", "python")[0]

        with pytest.raises(AttributeError):
            issue.message = "changed"

    def test_batteries_only_for_active_languages(self):
        """Given the rule table, only python, c, cpp and csharp have rules."""
        assert set(RULE_BATTERIES) == {
            Language.PYTHON, Language.C, Language.CPP, Language.CSHARP,
        }
        assert get_battery("java") == ()
        assert get_battery("javascript") == ()

    def test_issue_round_trips_through_dict(self):
        """Given an issue as dict, should rebuild an equal issue."""
        issue = detect(FACTORIAL, "python")[0]

        assert Issue.from_dict(issue.to_dict()) == issue
