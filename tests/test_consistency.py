"""
Cross-language consistency tests for Cursus.
"""

import pytest

from cursus.classroom import (
    StructuralMismatch,
    assert_consistent,
    check_consistency,
    compare_topics,
    curriculum_from_record,
)
from cursus.errors import StructuralDivergence


def es_with(make_curriculum_record, edit):
    record = make_curriculum_record("es")
    edit(record)
    return curriculum_from_record(record)


class TestIsomorphicTrees:
    """Translations that only differ in text."""

    def test_eight_lessons_match(self, pt_curriculum, es_curriculum):
        assert len(pt_curriculum.modules[0].lessons) == 8
        assert check_consistency(pt_curriculum, es_curriculum) == []

    def test_text_differences_ignored(self, pt_curriculum, es_curriculum):
        pt_lesson = pt_curriculum.modules[0].lessons[0]
        es_lesson = es_curriculum.modules[0].lessons[0]
        assert pt_lesson.blocks[1].text != es_lesson.blocks[1].text
        assert compare_topics(pt_lesson, es_lesson, "modulo-1/conf-1") == []

    def test_assert_consistent_passes(self, pt_curriculum, es_curriculum):
        assert_consistent(pt_curriculum, es_curriculum)


class TestBlockDivergence:
    """Block-level skeleton differences."""

    def test_removed_block_reported_once(self, pt_curriculum, make_curriculum_record):
        def drop_block(record):
            del record["modules"][0]["conferences"][2]["content"][3]

        es = es_with(make_curriculum_record, drop_block)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [
            StructuralMismatch("modulo-1/conf-3/blocks[3]", "paragraph", None),
        ]

    def test_added_block_reported_at_candidate_index(self, pt_curriculum, make_curriculum_record):
        def add_block(record):
            record["modules"][0]["conferences"][0]["content"].insert(1, {"type": "divider"})

        es = es_with(make_curriculum_record, add_block)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [
            StructuralMismatch("modulo-1/conf-1/blocks[1]", None, "divider"),
        ]

    def test_changed_kind(self, pt_curriculum, make_curriculum_record):
        def change_kind(record):
            record["modules"][0]["conferences"][4]["content"][4] = {"type": "callout", "text": "x"}

        es = es_with(make_curriculum_record, change_kind)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [
            StructuralMismatch("modulo-1/conf-5/blocks[4]", "code", "callout"),
        ]

    def test_quiz_answer_divergence(self, pt_curriculum, make_curriculum_record):
        def reorder_options(record):
            record["modules"][0]["conferences"][1]["content"][5]["questions"][1]["correctAnswer"] = 2

        es = es_with(make_curriculum_record, reorder_options)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [
            StructuralMismatch("modulo-1/conf-2/blocks[5]/questions[1]/correctAnswer", "1", "2"),
        ]

    def test_quiz_question_count(self, pt_curriculum, make_curriculum_record):
        def drop_question(record):
            del record["modules"][0]["conferences"][0]["content"][5]["questions"][1]

        es = es_with(make_curriculum_record, drop_question)
        mismatches = check_consistency(pt_curriculum, es)
        assert [m.path for m in mismatches] == ["modulo-1/conf-1/blocks[5]/questions"]


class TestTreeDivergence:
    """Module, lesson and singleton differences."""

    def test_missing_lesson(self, pt_curriculum, make_curriculum_record):
        def drop_lesson(record):
            del record["modules"][0]["conferences"][7]

        es = es_with(make_curriculum_record, drop_lesson)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [StructuralMismatch("modulo-1/lessons[7]", "conf-8", None)]

    def test_missing_module(self, pt_curriculum, make_curriculum_record, make_topic_record):
        def add_module(record):
            record["modules"].append({
                "id": "modulo-2",
                "title": "Módulo 2",
                "overview": make_topic_record("modulo-2-overview"),
            })

        es = es_with(make_curriculum_record, add_module)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [StructuralMismatch("modules[1]", None, "modulo-2")]

    def test_modules_matched_by_id_after_insertion(
        self, pt_curriculum, make_curriculum_record, make_topic_record
    ):
        def prepend_module_and_drop_lesson(record):
            del record["modules"][0]["conferences"][7]
            record["modules"].insert(0, {
                "id": "modulo-0",
                "title": "Módulo 0",
                "overview": make_topic_record("modulo-0-overview"),
            })

        es = es_with(make_curriculum_record, prepend_module_and_drop_lesson)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [
            StructuralMismatch("modules[0]", None, "modulo-0"),
            StructuralMismatch("modulo-1/lessons[7]", "conf-8", None),
        ]

    def test_missing_singleton(self, pt_curriculum, make_curriculum_record):
        def drop_bibliography(record):
            del record["bibliography"]

        es = es_with(make_curriculum_record, drop_bibliography)
        mismatches = check_consistency(pt_curriculum, es)
        assert mismatches == [StructuralMismatch("bibliography", "bibliography", None)]

    def test_divergence_error_carries_batch(self, pt_curriculum, make_curriculum_record):
        def break_two_lessons(record):
            del record["modules"][0]["conferences"][0]["content"][3]
            del record["modules"][0]["conferences"][5]["content"][3]

        es = es_with(make_curriculum_record, break_two_lessons)
        with pytest.raises(StructuralDivergence) as exc_info:
            assert_consistent(pt_curriculum, es)
        assert [m.path for m in exc_info.value.mismatches] == [
            "modulo-1/conf-1/blocks[3]",
            "modulo-1/conf-6/blocks[3]",
        ]

    def test_bundled_content_is_consistent(self, content_dir):
        from cursus.classroom import load_curricula

        curricula = load_curricula(content_dir, ["pt", "es"])
        assert check_consistency(curricula["pt"], curricula["es"]) == []
