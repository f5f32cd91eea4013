"""
Unit tests for KnockoutStageService.
"""
import pytest

from fencing.exceptions import EventNotFound, KnockoutStageNotFound, ValidationError
from fencing.models import KnockoutStage
from fencing.schemas import KnockoutStageData


class TestAddKnockoutStage:
    """Tests for add_knockout_stage method."""

    def test_add_stage(self, services, sample_event):
        """A new stage gets an id and is bound to the event."""
        stage = services.knockout_stages.add_knockout_stage(sample_event.id, KnockoutStageData())

        assert stage.id is not None
        assert stage.event_id == sample_event.id
        assert sample_event.knockout_stage is stage

    def test_missing_event(self, services):
        with pytest.raises(EventNotFound):
            services.knockout_stages.add_knockout_stage(999)

    def test_one_stage_per_event(self, services, sample_event):
        services.knockout_stages.add_knockout_stage(sample_event.id)

        with pytest.raises(ValidationError):
            services.knockout_stages.add_knockout_stage(sample_event.id)


class TestGetKnockoutStage:
    """Tests for get_knockout_stage and get_knockout_stage_for_event."""

    def test_get_by_id(self, services, sample_event):
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)

        assert services.knockout_stages.get_knockout_stage(stage.id) is stage

    def test_never_created(self, services):
        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.get_knockout_stage(999)

    def test_for_event(self, services, sample_event):
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)

        assert services.knockout_stages.get_knockout_stage_for_event(sample_event.id) is stage

    def test_for_event_without_stage(self, services, sample_event):
        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.get_knockout_stage_for_event(sample_event.id)

    def test_for_missing_event(self, services):
        with pytest.raises(EventNotFound):
            services.knockout_stages.get_knockout_stage_for_event(999)

    def test_of_event(self, services, sample_tournament, sample_event, make_event_data):
        """A stage is only found under the event it belongs to."""
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)
        other = services.events.add_event(sample_tournament.id, make_event_data())

        assert services.knockout_stages.get_knockout_stage_of_event(sample_event.id, stage.id) is stage
        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.get_knockout_stage_of_event(other.id, stage.id)


class TestUpdateKnockoutStage:
    """Tests for update_knockout_stage method."""

    def test_update(self, services, sample_event):
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)

        updated = services.knockout_stages.update_knockout_stage(sample_event.id, stage.id, KnockoutStageData())

        assert updated.id == stage.id
        assert updated.event_id == sample_event.id

    def test_stage_of_other_event(self, services, sample_tournament, sample_event, make_event_data):
        """A stage is only found under its own event."""
        other = services.events.add_event(sample_tournament.id, make_event_data())
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)

        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.update_knockout_stage(other.id, stage.id, KnockoutStageData())

    def test_event_cannot_change(self, services, sample_event):
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)

        with pytest.raises(ValidationError):
            services.knockout_stages.update_knockout_stage(
                sample_event.id, stage.id, KnockoutStageData(event_id=sample_event.id + 1)
            )

    def test_missing_stage(self, services, sample_event):
        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.update_knockout_stage(sample_event.id, 999, KnockoutStageData())


class TestDeleteKnockoutStage:
    """Tests for delete_knockout_stage method."""

    def test_delete(self, services, sample_event):
        stage = services.knockout_stages.add_knockout_stage(sample_event.id)
        stage_id = stage.id

        services.knockout_stages.delete_knockout_stage(sample_event.id, stage_id)

        assert KnockoutStage.query.count() == 0
        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.get_knockout_stage(stage_id)

    def test_missing_stage(self, services, sample_event):
        with pytest.raises(KnockoutStageNotFound):
            services.knockout_stages.delete_knockout_stage(sample_event.id, 999)
