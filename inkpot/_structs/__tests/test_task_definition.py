#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod

import pytest
logging = logmod.root

import inkpot.errors as IErr
from inkpot._structs.arg_types import ArgumentTypes
from inkpot._structs.param_definition import ParamDefinition
from inkpot._structs.task_definition import TaskDefinition, TaskDefinitionBuilder

def noop(args, env, run_super):
    return None

class TestTaskDefinitionBuilder:

    def test_initial(self):
        obj = TaskDefinitionBuilder("simple", description="a task", action=noop)
        assert(isinstance(obj.definition, TaskDefinition))
        assert(obj.name == "simple")
        assert(obj.definition.description == "a task")
        assert(obj.definition.action is noop)
        assert(not obj.definition.is_subtask)

    def test_fluent_calls_replace_definition(self):
        obj    = TaskDefinitionBuilder("simple")
        before = obj.definition
        result = obj.add_param("blah").set_description("updated")
        assert(result is obj)
        assert(obj.definition is not before)
        assert(before.param_definitions == {})
        assert("blah" in obj.definition.param_definitions)
        assert(obj.definition.description == "updated")

    def test_set_action_requires_callable(self):
        with pytest.raises(TypeError):
            TaskDefinitionBuilder("simple").set_action("not a function")

    def test_unset_action_raises(self):
        import asyncio
        obj = TaskDefinitionBuilder("simple")
        with pytest.raises(IErr.ActionNotSetError):
            asyncio.run(obj.definition.action({}, None, None))

    def test_frozen_builder(self):
        obj = TaskDefinitionBuilder("simple")
        obj.freeze()
        with pytest.raises(IErr.RegistryFrozenError):
            obj.add_param("blah")
        with pytest.raises(IErr.RegistryFrozenError):
            obj.set_action(noop)

class TestNamedParams:

    def test_param_kinds(self):
        obj = (TaskDefinitionBuilder("simple")
               .add_param("first")
               .add_optional_param("second", default="blah")
               .add_flag("third"))
        params = obj.definition.param_definitions
        assert(not params['first'].is_optional)
        assert(params['second'].is_optional)
        assert(params['second'].default == "blah")
        assert(params['third'].is_flag)
        assert(params['third'].default is False)
        assert(params['third'].type_ is ArgumentTypes.boolean)

    def test_duplicate_name(self):
        obj = TaskDefinitionBuilder("simple").add_param("blah")
        with pytest.raises(IErr.ParamAlreadyDefinedError):
            obj.add_optional_param("blah")

    def test_duplicate_across_named_and_positional(self):
        obj = TaskDefinitionBuilder("simple").add_positional_param("blah")
        with pytest.raises(IErr.ParamAlreadyDefinedError):
            obj.add_param("blah")

    @pytest.mark.parametrize("name", ["Blah", "1blah", "bad-name", "", "_blah"])
    def test_invalid_name(self, name):
        with pytest.raises(IErr.InvalidParamNameError):
            TaskDefinitionBuilder("simple").add_param(name)

    @pytest.mark.parametrize("name", ["network", "config", "verbose", "help", "version"])
    def test_clashes_with_global(self, name):
        with pytest.raises(IErr.ParamClashesWithGlobalError):
            TaskDefinitionBuilder("simple").add_optional_param(name)

    def test_default_on_mandatory(self):
        with pytest.raises(IErr.DefaultInMandatoryParamError):
            TaskDefinitionBuilder("simple").add_param("blah", default="val")

    def test_default_wrong_type(self):
        with pytest.raises(IErr.DefaultValueWrongTypeError):
            TaskDefinitionBuilder("simple").add_optional_param("count", default="ten", type_=ArgumentTypes.int)

    def test_non_cli_type_in_task(self):
        with pytest.raises(IErr.NonCLITypeInTaskError):
            TaskDefinitionBuilder("simple").add_param("data", type_=ArgumentTypes.any)

    def test_non_cli_type_in_subtask(self):
        obj = TaskDefinitionBuilder("simple", is_subtask=True).add_param("data", type_=ArgumentTypes.any)
        assert(obj.definition.param_definitions['data'].type_ is ArgumentTypes.any)

    def test_error_carries_task_name(self):
        with pytest.raises(IErr.TaskDefinitionError) as ctx:
            TaskDefinitionBuilder("simple").add_param("blah", default="val")

        assert(ctx.value.task == "simple")

class TestPositionalParams:

    def test_order_kept(self):
        obj = (TaskDefinitionBuilder("simple")
               .add_positional_param("first")
               .add_optional_positional_param("second")
               .add_optional_variadic_positional_param("rest"))
        names = [x.name for x in obj.definition.positional_param_definitions]
        assert(names == ["first", "second", "rest"])
        assert(obj.definition.positional_param_definitions[-1].is_variadic)

    def test_mandatory_after_optional(self):
        obj = TaskDefinitionBuilder("simple").add_optional_positional_param("first")
        with pytest.raises(IErr.MandatoryParamAfterOptionalError):
            obj.add_positional_param("second")

    def test_param_after_variadic(self):
        obj = TaskDefinitionBuilder("simple").add_variadic_positional_param("rest")
        with pytest.raises(IErr.ParamAfterVariadicError):
            obj.add_optional_positional_param("more")

    def test_variadic_default_must_be_list(self):
        with pytest.raises(IErr.DefaultValueWrongTypeError):
            TaskDefinitionBuilder("simple").add_optional_variadic_positional_param("rest", default="a")

    def test_variadic_default_items_typed(self):
        with pytest.raises(IErr.DefaultValueWrongTypeError):
            TaskDefinitionBuilder("simple").add_optional_variadic_positional_param("rest", default=["a"], type_=ArgumentTypes.int)

    def test_all_params(self):
        obj = (TaskDefinitionBuilder("simple")
               .add_param("named")
               .add_positional_param("pos"))
        assert([x.name for x in obj.definition.all_params] == ["named", "pos"])
        assert(obj.definition.has_param("pos"))
        assert(not obj.definition.has_param("other"))

class TestParamDefinition:

    def test_flag_must_be_optional_boolean(self):
        with pytest.raises(ValueError):
            ParamDefinition(name="blah", is_flag=True)

    def test_cli_name(self):
        obj = ParamDefinition(name="some_param")
        assert(obj.cli_name == "some-param")
        assert(obj.key_str == "--some-param")

    def test_str(self):
        obj    = ParamDefinition(name="count", type_=ArgumentTypes.int, description="How many", is_optional=True, default=2)
        result = str(obj)
        assert(result.startswith("[count]"))
        assert("(int)" in result)
        assert("How many" in result)
        assert("(default: 2)" in result)

    def test_parse_variadic_single_string(self):
        obj = ParamDefinition(name="vals", type_=ArgumentTypes.int, is_variadic=True)
        assert(obj.parse_value("3") == [3])

    def test_parse_variadic_composite_flattens(self, tmp_path):
        (tmp_path / "a.txt").touch()
        (tmp_path / "b.txt").touch()
        obj = ParamDefinition(name="files", type_=ArgumentTypes.file_pattern, is_variadic=True)
        result = obj.parse_value([str(tmp_path / "a.*"), str(tmp_path / "b.*")])
        assert(result == [tmp_path / "a.txt", tmp_path / "b.txt"])
        obj.validate_value(result)

    def test_parse_passes_typed_values(self):
        obj = ParamDefinition(name="count", type_=ArgumentTypes.int)
        assert(obj.parse_value(5) == 5)

    def test_validate_variadic_rejects_str(self):
        obj = ParamDefinition(name="vals", is_variadic=True)
        with pytest.raises(IErr.InvalidArgumentError):
            obj.validate_value("blah")
