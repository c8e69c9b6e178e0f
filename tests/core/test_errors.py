"""
Tests for core.errors and core.models.rotation
"""
import pytest

from sheet_composer.core import CollaboratorFailure, ComposerError, InvalidFormat, RotationSpec
from sheet_composer.core.errors import STAGE_TILE, STAGES, collaborator_call


class TestComposerError:

    def test_unknown_stage_rejected(self):
        with pytest.raises(ValueError, match="Unknown pipeline stage"):
            ComposerError("oops", stage="render")

    @pytest.mark.parametrize("stage", STAGES)
    def test_known_stages_accepted(self, stage):
        assert ComposerError("oops", stage=stage).stage == stage

    def test_stage_in_message(self):
        err = InvalidFormat("bad width", stage="plan")

        assert err.stage == "plan"
        assert str(err) == "[plan] bad width"

    def test_no_stage(self):
        assert str(ComposerError("oops")) == "oops"


class TestCollaboratorCall:

    def test_wraps_backend_errors(self):
        with pytest.raises(CollaboratorFailure, match="during crop") as excinfo:
            with collaborator_call(STAGE_TILE, "crop"):
                raise MemoryError("no room")

        assert excinfo.value.stage == STAGE_TILE
        assert isinstance(excinfo.value.__cause__, MemoryError)

    def test_taxonomy_errors_pass_through(self):
        with pytest.raises(InvalidFormat):
            with collaborator_call(STAGE_TILE, "crop"):
                raise InvalidFormat("already typed")


class TestRotationSpec:

    def test_defaults_do_not_rotate(self):
        spec = RotationSpec()

        assert not spec.rotates_tile
        assert not spec.rotates_output

    def test_only_positive_angles_rotate(self):
        spec = RotationSpec(tile_degrees=-90, output_degrees=0.5)

        assert not spec.rotates_tile
        assert spec.rotates_output

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "90", True])
    def test_invalid_angles_raise(self, value):
        with pytest.raises(ValueError):
            RotationSpec(tile_degrees=value)
