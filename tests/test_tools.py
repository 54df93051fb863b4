"""Tests for tool argument validation and tool definitions."""

import asyncio

import pytest

from conftest import StubClient
from usekeen_mcp.core.exceptions import ArgumentValidationError
from usekeen_mcp.tools.package_doc_search_tool import PackageDocSearchInput, PackageDocSearchTool
from usekeen_mcp.tools.package_search_tool import PackageSearchInput, PackageSearchTool


class TestPackageDocSearchTool:
    """Tests for usekeen_package_doc_search."""

    def test_query_defaults_to_empty_string(self):
        args = PackageDocSearchTool().validate_arguments({"package_name": "react"})

        assert isinstance(args, PackageDocSearchInput)
        assert args.package_name == "react"
        assert args.query == ""

    def test_missing_package_name_names_the_field(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            PackageDocSearchTool().validate_arguments({"query": "hooks"})

        assert "package_name" in str(exc_info.value)
        assert exc_info.value.tool_name == "usekeen_package_doc_search"

    def test_validation_error_carries_tool_name_and_message(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            PackageDocSearchTool().validate_arguments({})

        error = exc_info.value
        assert error.tool_name == "usekeen_package_doc_search"
        assert str(error) == "Invalid arguments for tool 'usekeen_package_doc_search': package_name: Field required"
        assert not hasattr(error, "message")

    def test_empty_package_name_is_rejected(self):
        with pytest.raises(ArgumentValidationError, match="package_name"):
            PackageDocSearchTool().validate_arguments({"package_name": ""})

    def test_non_string_package_name_is_rejected(self):
        with pytest.raises(ArgumentValidationError, match="package_name"):
            PackageDocSearchTool().validate_arguments({"package_name": 42})

    def test_schema_marks_only_package_name_required(self):
        schema = PackageDocSearchTool().get_definition().input_schema

        assert schema["type"] == "object"
        assert schema["required"] == ["package_name"]
        assert schema["properties"]["query"]["default"] == ""

    def test_execute_forwards_to_fetch_documentation(self):
        tool = PackageDocSearchTool()
        client = StubClient(doc_result={"results": ["a"]})

        result = asyncio.run(tool.execute(client, tool.validate_arguments({"package_name": "aws-s3", "query": "upload"})))

        assert result == {"results": ["a"]}
        assert client.calls == [{"op": "fetch_documentation", "package_name": "aws-s3", "query": "upload"}]


class TestPackageSearchTool:
    """Tests for usekeen_package_search."""

    def test_max_results_defaults_to_ten(self):
        args = PackageSearchTool().validate_arguments({"query": "orm"})

        assert isinstance(args, PackageSearchInput)
        assert args.max_results == 10

    @pytest.mark.parametrize("value", [1, 50, 100])
    def test_max_results_bounds_are_inclusive(self, value):
        assert PackageSearchTool().validate_arguments({"query": "orm", "max_results": value}).max_results == value

    @pytest.mark.parametrize("value", [0, -1, 101, 1000])
    def test_max_results_out_of_range_is_rejected(self, value):
        with pytest.raises(ArgumentValidationError, match="max_results"):
            PackageSearchTool().validate_arguments({"query": "orm", "max_results": value})

    def test_fractional_max_results_is_rejected(self):
        with pytest.raises(ArgumentValidationError, match="max_results"):
            PackageSearchTool().validate_arguments({"query": "orm", "max_results": 2.5})

    @pytest.mark.parametrize("value", ["5", True, 5.0])
    def test_max_results_must_be_a_json_integer(self, value):
        with pytest.raises(ArgumentValidationError, match="max_results"):
            PackageSearchTool().validate_arguments({"query": "orm", "max_results": value})

    def test_empty_query_is_rejected(self):
        with pytest.raises(ArgumentValidationError, match="query"):
            PackageSearchTool().validate_arguments({"query": ""})

    def test_non_object_arguments_are_rejected(self):
        with pytest.raises(ArgumentValidationError, match="usekeen_package_search"):
            PackageSearchTool().validate_arguments(["orm"])

    def test_schema_advertises_bounds_and_default(self):
        schema = PackageSearchTool().get_definition().input_schema
        max_results = schema["properties"]["max_results"]

        assert schema["required"] == ["query"]
        assert max_results["minimum"] == 1
        assert max_results["maximum"] == 100
        assert max_results["default"] == 10
