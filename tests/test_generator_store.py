"""Tests for the generator wizard store."""

import pytest

from cv_site.data.examples import (
    EXAMPLE_JOB_DESCRIPTION,
    EXAMPLE_PROFILE_SOURCES,
    EXAMPLE_SUMMARY,
)
from cv_site.generation import SUCCESS_TEXT
from cv_site.stores.generator import GeneratorStore


class TestInitialState:
    """Tests for the state a new store starts with."""

    def test_defaults(self, store: GeneratorStore) -> None:
        state = store.state
        assert state.current_step == 1
        assert len(state.profile_sources) == 1
        assert state.profile_sources[0].type == "github"
        assert state.profile_sources[0].value == ""
        assert state.manual_professional_summary == ""
        assert state.job_input_type == "text"
        assert state.job_target_value == ""
        assert state.is_generating is False
        assert state.generation_step_text == ""
        assert state.generation_progress == 0
        assert state.show_success is False
        assert state.error_message == ""
        assert state.show_generator is True

    def test_two_steps(self, store: GeneratorStore) -> None:
        assert store.total_steps == 2
        assert [step.title for step in store.steps] == ["Profile Data", "Target Job"]
        assert store.current_step_definition is store.steps[0]

    def test_stores_are_independent(self) -> None:
        first = GeneratorStore()
        second = GeneratorStore()
        first.update_manual_summary("Only here")
        assert second.state.manual_professional_summary == ""


class TestStepOneValidation:
    """Advancing from step 1 needs a non-empty source or summary."""

    def test_blocked_when_empty(self, store: GeneratorStore) -> None:
        assert store.is_next_button_disabled is True
        store.next_step()
        assert store.state.current_step == 1
        assert store.state.error_message == (
            "Please complete all required fields for Profile Data before proceeding."
        )

    def test_blank_values_do_not_count(self, store: GeneratorStore) -> None:
        store.update_profile_source(store.state.profile_sources[0].id, new_value="   ")
        store.update_manual_summary("\n\t ")
        store.next_step()
        assert store.state.current_step == 1

    def test_source_value_unblocks(self, store: GeneratorStore) -> None:
        store.update_profile_source(store.state.profile_sources[0].id, new_value="octocat")
        assert store.is_next_button_disabled is False
        store.next_step()
        assert store.state.current_step == 2
        assert store.state.error_message == ""

    def test_summary_alone_unblocks(self, store: GeneratorStore) -> None:
        store.update_manual_summary("Backend engineer")
        store.next_step()
        assert store.state.current_step == 2

    def test_any_source_counts(self, store: GeneratorStore) -> None:
        added = store.add_profile_source()
        store.update_profile_source(added.id, new_value="https://example.com")
        store.next_step()
        assert store.state.current_step == 2

    def test_success_clears_previous_error(self, store: GeneratorStore) -> None:
        store.next_step()
        assert store.state.error_message
        store.update_manual_summary("Backend engineer")
        store.next_step()
        assert store.state.error_message == ""


class TestStepTwoValidation:
    """Advancing from step 2 needs a non-empty job target."""

    def test_blocked_without_job_target(self, store: GeneratorStore) -> None:
        store.update_manual_summary("Backend engineer")
        store.next_step()
        store.next_step()
        assert store.state.current_step == 2
        assert "Target Job" in store.state.error_message

    def test_next_on_last_step_stays(self, ready_store: GeneratorStore) -> None:
        ready_store.next_step()
        assert ready_store.state.current_step == 2
        assert ready_store.state.error_message == ""

    def test_whitespace_job_target_is_empty(self, ready_store: GeneratorStore) -> None:
        ready_store.update_job_target_value("   ")
        assert ready_store.is_next_button_disabled is True


class TestPrevStep:
    """Tests for going back."""

    def test_decrements_and_clears_error(self, ready_store: GeneratorStore) -> None:
        ready_store.update_job_target_value("")
        ready_store.next_step()
        assert ready_store.state.error_message
        ready_store.prev_step()
        assert ready_store.state.current_step == 1
        assert ready_store.state.error_message == ""

    def test_bounded_at_first_step(self, store: GeneratorStore) -> None:
        store.next_step()
        store.prev_step()
        assert store.state.current_step == 1
        # Error untouched when nothing moved
        assert store.state.error_message


class TestProfileSources:
    """Tests for adding, removing and updating profile sources."""

    def test_add_appends_other_source(self, store: GeneratorStore) -> None:
        added = store.add_profile_source()
        assert store.state.profile_sources[-1] == added
        assert added.type == "other"
        assert added.value == ""

    def test_ids_are_unique(self, store: GeneratorStore) -> None:
        for _ in range(5):
            store.add_profile_source()
        ids = [source.id for source in store.state.profile_sources]
        assert len(set(ids)) == len(ids)

    def test_remove_by_id_removes_exactly_that_entry(self, store: GeneratorStore) -> None:
        first = store.state.profile_sources[0]
        second = store.add_profile_source()
        third = store.add_profile_source()
        store.update_profile_source(third.id, new_value="https://example.com")
        third = store.state.profile_sources[2]

        store.remove_profile_source(second.id)

        assert store.state.profile_sources == [first, third]

    def test_remove_unknown_id_is_noop(self, store: GeneratorStore) -> None:
        before = list(store.state.profile_sources)
        store.remove_profile_source("missing")
        assert store.state.profile_sources == before

    def test_update_value_keeps_type(self, store: GeneratorStore) -> None:
        source_id = store.state.profile_sources[0].id
        store.update_profile_source(source_id, new_value="octocat")
        source = store.state.profile_sources[0]
        assert source.id == source_id
        assert source.type == "github"
        assert source.value == "octocat"

    def test_update_type_keeps_value(self, store: GeneratorStore) -> None:
        source_id = store.state.profile_sources[0].id
        store.update_profile_source(source_id, new_value="octocat")
        store.update_profile_source(source_id, new_type="linkedin")
        source = store.state.profile_sources[0]
        assert source.type == "linkedin"
        assert source.value == "octocat"

    def test_update_leaves_other_entries(self, store: GeneratorStore) -> None:
        other = store.add_profile_source()
        store.update_profile_source(store.state.profile_sources[0].id, new_value="x")
        assert store.state.profile_sources[1] == other

    def test_update_unknown_id_is_noop(self, store: GeneratorStore) -> None:
        before = list(store.state.profile_sources)
        store.update_profile_source("missing", new_type="linkedin", new_value="x")
        assert store.state.profile_sources == before


class TestAvailableProfileOptions:
    """Unique source types can only be picked once."""

    def test_all_options_for_single_source(self, store: GeneratorStore) -> None:
        source_id = store.state.profile_sources[0].id
        types = [o.type for o in store.available_profile_options(source_id)]
        assert types == ["github", "linkedin", "other"]

    def test_taken_unique_type_hidden_for_others(self, store: GeneratorStore) -> None:
        added = store.add_profile_source()
        types = [o.type for o in store.available_profile_options(added.id)]
        assert "github" not in types
        assert "linkedin" in types

    def test_other_never_taken(self, store: GeneratorStore) -> None:
        store.update_profile_source(store.state.profile_sources[0].id, new_type="other")
        added = store.add_profile_source()
        types = [o.type for o in store.available_profile_options(added.id)]
        assert "other" in types
        assert "github" in types


class TestJobTarget:
    """Tests for job input type and value."""

    def test_changing_type_clears_value(self, ready_store: GeneratorStore) -> None:
        ready_store.update_job_input_type("url")
        assert ready_store.state.job_input_type == "url"
        assert ready_store.state.job_target_value == ""

    def test_update_value(self, store: GeneratorStore) -> None:
        store.update_job_target_value("https://jobs.example.com/1")
        assert store.state.job_target_value == "https://jobs.example.com/1"


class TestExampleAndClear:
    """Tests for fill_example_data and clear_all_data."""

    def test_fill_example_data(self, store: GeneratorStore) -> None:
        store.update_job_input_type("url")
        store.state.error_message = "old error"

        store.fill_example_data()

        state = store.state
        assert [(s.type, s.value) for s in state.profile_sources] == EXAMPLE_PROFILE_SOURCES
        assert state.manual_professional_summary == EXAMPLE_SUMMARY
        assert state.job_input_type == "text"
        assert state.job_target_value == EXAMPLE_JOB_DESCRIPTION
        assert state.error_message == ""
        assert state.current_step == 1

    def test_fill_example_uses_fresh_ids(self, store: GeneratorStore) -> None:
        store.fill_example_data()
        first_ids = {s.id for s in store.state.profile_sources}
        store.fill_example_data()
        second_ids = {s.id for s in store.state.profile_sources}
        assert first_ids.isdisjoint(second_ids)

    def test_clear_all_data_resets_everything(self, ready_store: GeneratorStore) -> None:
        ready_store.update_manual_summary("Summary")
        ready_store.start_generation()
        ready_store.view_generated_cv()

        ready_store.clear_all_data()

        state = ready_store.state
        assert state.current_step == 1
        assert len(state.profile_sources) == 1
        assert state.profile_sources[0].type == "other"
        assert state.profile_sources[0].value == ""
        assert state.manual_professional_summary == ""
        assert state.job_input_type == "text"
        assert state.job_target_value == ""
        assert state.is_generating is False
        assert state.generation_step_text == ""
        assert state.generation_progress == 0
        assert state.show_success is False
        assert state.error_message == ""
        assert state.show_generator is True


class TestStartGeneration:
    """Tests for running the simulated generation through the store."""

    def test_rejected_when_current_step_invalid(self, store: GeneratorStore) -> None:
        assert store.start_generation() is False
        assert store.state.is_generating is False
        assert store.state.error_message == (
            "Please complete all required fields for Profile Data before generating."
        )

    def test_completes_with_success(self, ready_store: GeneratorStore) -> None:
        assert ready_store.start_generation() is True
        state = ready_store.state
        assert state.is_generating is False
        assert state.show_success is True
        assert state.generation_progress == 100
        assert state.generation_step_text == SUCCESS_TEXT

    def test_state_tracks_progress(self, ready_store: GeneratorStore) -> None:
        seen = []

        def on_progress(update) -> None:
            seen.append(
                (
                    ready_store.state.is_generating,
                    ready_store.state.generation_progress,
                    ready_store.state.generation_step_text,
                )
            )
            assert update.text == ready_store.state.generation_step_text

        ready_store.start_generation(on_progress=on_progress)

        assert all(generating for generating, _, _ in seen[:-1])
        percents = [percent for _, percent, _ in seen]
        assert percents == sorted(percents)
        assert seen[-1] == (False, 100, SUCCESS_TEXT)

    def test_sleep_override(self, ready_store: GeneratorStore) -> None:
        calls = []
        ready_store.start_generation(sleep=calls.append)
        assert len(calls) == 8

    def test_ignored_while_generating(self, ready_store: GeneratorStore) -> None:
        ready_store.state.is_generating = True
        assert ready_store.start_generation() is False
        assert ready_store.state.error_message == "Generation is already in progress."

    def test_interrupted_run_does_not_lock_store(self, ready_store: GeneratorStore) -> None:
        class Interrupted(Exception):
            pass

        def on_progress(update) -> None:
            raise Interrupted

        with pytest.raises(Interrupted):
            ready_store.start_generation(on_progress=on_progress)

        assert ready_store.state.is_generating is False
        assert ready_store.start_generation() is True
        assert ready_store.state.show_success is True
        assert ready_store.state.error_message == ""

    def test_restart_resets_previous_run(self, ready_store: GeneratorStore) -> None:
        ready_store.start_generation()
        first_updates = []
        ready_store.start_generation(on_progress=first_updates.append)
        assert first_updates[0].percent == 0


class TestVisibility:
    """Tests for switching between generator and generated CV."""

    def test_view_generated_cv_hides_generator(self, ready_store: GeneratorStore) -> None:
        ready_store.start_generation()
        ready_store.view_generated_cv()
        assert ready_store.state.show_generator is False
        assert ready_store.state.show_success is True

    def test_generate_another_clears(self, ready_store: GeneratorStore) -> None:
        ready_store.start_generation()
        ready_store.view_generated_cv()
        ready_store.generate_another()
        assert ready_store.state.show_generator is True
        assert ready_store.state.current_step == 1
        assert ready_store.state.show_success is False
