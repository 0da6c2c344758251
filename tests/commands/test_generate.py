# tests/commands/test_generate.py
"""Tests for the generate command."""

from datetime import date
from pathlib import Path

from speccraft.commands import answer, generate, navigate
from speccraft.engine import QuestionnaireEngine


class TestGenerateCommand:
    """Tests for generate.generate()."""

    def test_generate_writes_default_path(self, store, completed_session_id, tmp_path) -> None:
        """The specification lands in specs/NNN_<feature>/ under the working directory."""
        result = generate.generate(
            completed_session_id, store=store, generated_on=date(2024, 1, 15)
        )

        assert result.success is True
        assert result.feature_title == "Comments"
        assert Path(result.path) == Path("specs") / "001_comments" / "comments_spec.md"
        written = (tmp_path / result.path).read_text(encoding="utf-8")
        assert written == result.markdown
        assert result.markdown.startswith("# Feature: Comments")
        assert "2024-01-15" in result.markdown
        assert result.completion_percentage == 100

    def test_generate_numbers_follow_existing(self, store, completed_session_id, tmp_path) -> None:
        """The spec directory number follows the highest existing prefix."""
        (tmp_path / "specs" / "004_other").mkdir(parents=True)

        result = generate.generate(completed_session_id, store=store)

        assert Path(result.path).parent.name == "005_comments"

    def test_generate_explicit_output(self, store, completed_session_id, tmp_path) -> None:
        target = tmp_path / "out" / "comments.md"

        result = generate.generate(completed_session_id, output_path=target, store=store)

        assert result.path == str(target)
        assert target.exists()

    def test_generate_preview_length(self, store, completed_session_id, tmp_path) -> None:
        """The preview is the first preview_chars characters of the markdown."""
        config_file = tmp_path / "speccraft.yaml"
        config_file.write_text("settings:\n  preview_chars: 20\n")

        result = generate.generate(completed_session_id, store=store, config_path=config_file)

        assert result.preview == result.markdown[:20]

    def test_generate_uses_specs_dir_setting(
        self, store, completed_session_id, tmp_path, monkeypatch
    ) -> None:
        monkeypatch.setenv("SPECCRAFT_SPECS_DIR", str(tmp_path / "docs"))

        result = generate.generate(completed_session_id, store=store)

        assert Path(result.path).parent.parent == tmp_path / "docs"

    def test_generate_incomplete_session(self, store, session_id, tmp_path) -> None:
        """An unfinished session is refused with its completion percentage."""
        answer.answer(session_id, "Let readers discuss posts", store=store)

        result = generate.generate(session_id, store=store)

        assert result.success is False
        assert "5% done" in result.error
        assert result.completion_percentage == 5
        assert len(result.missing_required) == 12
        assert not (tmp_path / "specs").exists()

    def test_generate_missing_required(self, store, session_id) -> None:
        """Skipping to the end still leaves required answers missing."""
        navigate.goto(session_id, "success-criteria", store=store)
        answer.answer(session_id, "More replies per post", store=store)

        result = generate.generate(session_id, store=store)

        assert result.success is False
        assert result.error == "12 required question(s) have no answer."
        assert len(result.missing_required) == 12

    def test_generate_unknown_session(self, store) -> None:
        result = generate.generate("missing", store=store)

        assert result.success is False
        assert result.error == "Session missing not found"

    def test_generate_review_prompt(self, store, completed_session_id) -> None:
        """The result carries a quality review prompt over the written document."""
        result = generate.generate(completed_session_id, store=store)

        assert "Generated Specification:" in result.review_prompt
        assert result.markdown in result.review_prompt

    def test_generate_invalid_settings(self, store, completed_session_id, tmp_path) -> None:
        """Out-of-range settings are reported instead of raised."""
        (tmp_path / "speccraft.yaml").write_text("settings:\n  preview_chars: -1\n")

        result = generate.generate(completed_session_id, store=store)

        assert result.success is False
        assert result.error.startswith("Invalid settings")
        assert not (tmp_path / "specs").exists()

    def test_generate_title_with_path_characters(self, store, answer_all, tmp_path) -> None:
        """Slashes and dots in the title never leave the specs directory."""
        engine = answer_all(QuestionnaireEngine.new("../A/B testing"))
        store.save(engine.session)

        result = generate.generate(engine.session.id, store=store)

        assert Path(result.path) == Path("specs") / "001_ab_testing" / "ab_testing_spec.md"
        assert (tmp_path / result.path).exists()
