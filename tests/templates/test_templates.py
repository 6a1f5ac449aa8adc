"""Tests for starter policy files."""

import pytest

from shwrap.configs import parse_document
from shwrap.configs.validation import IssueLevel, validate_document
from shwrap.core.exceptions import ConfigInitError
from shwrap.templates import PROJECT_TEMPLATES, get_template


class TestTemplates:
    """Every shipped template must pass config check."""

    @pytest.mark.parametrize("name", [None, *PROJECT_TEMPLATES])
    def test_template_is_valid(self, name, environment):
        document = parse_document(get_template(name))

        issues = validate_document(document, environment)

        assert document.commands
        assert [i for i in issues if i.level == IssueLevel.ERROR] == []

    def test_unknown_template(self):
        with pytest.raises(ConfigInitError, match="Unknown template: cobol"):
            get_template("cobol")
