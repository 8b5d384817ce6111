"""Unit tests for the customization hook contract."""

import pytest

from ets_to_hass.exceptions import HookError
from ets_to_hass.hooks import apply_hook, load_hook
from ets_to_hass.model_builder import ModelBuilder
from ets_to_hass.models import ProjectModel


class TestApplyHook:
    """Test running a hook on a model."""

    def test_hook_changes_model(self, sample_trees):
        model = ModelBuilder.from_trees(sample_trees)

        def fix_datapoint(m):
            m.addresses['GA-8'].datapoint_type = '1.011'
            del m.objects['F-5']

        assert apply_hook(model, fix_datapoint) is model
        assert model.addresses['GA-8'].datapoint_type == '1.011'
        assert 'F-5' not in model.objects
        assert model.hook_applied is True

    def test_runs_once(self):
        calls = []
        model = ProjectModel()
        apply_hook(model, calls.append)
        with pytest.raises(HookError, match="already applied"):
            apply_hook(model, calls.append)
        assert calls == [model]

    def test_exception_aborts(self):
        def broken(model):
            raise ValueError("boom")

        with pytest.raises(HookError, match="boom") as exc_info:
            apply_hook(ProjectModel(), broken)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_false_result_aborts(self):
        with pytest.raises(HookError, match="reported a failure"):
            apply_hook(ProjectModel(), lambda model: False)

    def test_true_result_is_success(self):
        model = apply_hook(ProjectModel(), lambda model: True)
        assert model.hook_applied


class TestLoadHook:
    """Test loading hook files."""

    def test_load(self, tmp_path):
        hook_file = tmp_path / "my_hook.py"
        hook_file.write_text(
            "def customize(model):\n"
            "    model.name = 'customized'\n",
            encoding='utf-8',
        )
        hook = load_hook(hook_file)
        model = apply_hook(ProjectModel(), hook)
        assert model.name == 'customized'

    def test_missing_file(self, tmp_path):
        with pytest.raises(HookError, match="not found"):
            load_hook(tmp_path / "missing.py")

    def test_missing_function(self, tmp_path):
        hook_file = tmp_path / "empty_hook.py"
        hook_file.write_text("VALUE = 1\n", encoding='utf-8')
        with pytest.raises(HookError, match="customize"):
            load_hook(hook_file)

    def test_import_error(self, tmp_path):
        hook_file = tmp_path / "bad_hook.py"
        hook_file.write_text("raise RuntimeError('cannot import')\n", encoding='utf-8')
        with pytest.raises(HookError, match="cannot import"):
            load_hook(hook_file)
