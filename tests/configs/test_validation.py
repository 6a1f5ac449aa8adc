"""Tests for strict policy validation."""

from shwrap.configs.validation import IssueLevel, validate_document


class TestValidateDocument:
    """Tests for config check issues."""

    def test_valid_document_has_no_issues(self, load_document, environment):
        """A clean document reports nothing."""
        document = load_document(
            """
templates:
  base:
    ro_bind: [/usr]
commands:
  node:
    extends: base
    share: [network]
    bind: ["~/.npm:~/.npm"]
"""
        )

        assert validate_document(document, environment) == []

    def test_unknown_namespace(self, load_document, environment):
        """Unknown namespaces are errors here, unlike during synthesis."""
        document = load_document("commands:\n  node:\n    share: [network, mount]\n")

        issues = validate_document(document, environment)

        assert len(issues) == 1
        assert issues[0].level == IssueLevel.ERROR
        assert issues[0].location == "commands.node.share"
        assert "mount" in issues[0].message

    def test_malformed_bind_in_template(self, load_document, environment):
        """Bind specs in templates are checked too."""
        document = load_document(
            """
templates:
  base:
    bind: [/only-one-side]
commands:
  node:
    extends: base
"""
        )

        issues = validate_document(document, environment)

        assert [issue.location for issue in issues] == ["templates.base.bind"]
        assert issues[0].level == IssueLevel.ERROR

    def test_missing_template(self, load_document, environment):
        """A dangling extends is an error."""
        document = load_document("commands:\n  node:\n    extends: ghost\n")

        issues = validate_document(document, environment)

        assert len(issues) == 1
        assert issues[0].location == "commands.node.extends"
        assert "ghost" in issues[0].message

    def test_set_and_unset_env(self, load_document, environment):
        """Setting and unsetting the same variable is a warning."""
        document = load_document(
            "commands:\n  node:\n    env: {DEBUG: '1'}\n    unset_env: [DEBUG]\n"
        )

        issues = validate_document(document, environment)

        assert len(issues) == 1
        assert issues[0].level == IssueLevel.WARNING

    def test_unused_template(self, load_document, environment):
        """Templates nobody extends are a warning."""
        document = load_document("templates:\n  spare: {}\ncommands:\n  node: {}\n")

        issues = validate_document(document, environment)

        assert [(issue.level, issue.location) for issue in issues] == [
            (IssueLevel.WARNING, "templates.spare")
        ]
