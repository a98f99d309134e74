"""Unit tests for InitProjectUseCase."""

from unittest.mock import MagicMock, call

import pytest

from flock_cli.domain.entities import OperationResult, ScaffoldReport
from flock_cli.domain.exceptions import AlreadyInitialized, OperationFailed
from flock_cli.domain.services.manifest_introspector import ManifestIntrospector
from flock_cli.infrastructure.services.dependency_prefetcher import DependencyPrefetcher
from flock_cli.infrastructure.services.environment_creator import EnvironmentCreator
from flock_cli.infrastructure.services.gitignore_updater import GitIgnoreUpdater
from flock_cli.infrastructure.services.scaffolder import Scaffolder
from flock_cli.use_cases.init_project import InitProjectUseCase


def _mocked_use_case(paths, telemetry):
    steps = MagicMock()
    steps.scaffolder.scaffold.return_value = ScaffoldReport()
    steps.gitignore_updater.update.return_value = OperationResult.success(True)
    steps.prefetcher.build.return_value = OperationResult.failure("compile failed")
    use_case = InitProjectUseCase(
        paths, steps.scaffolder, steps.gitignore_updater, steps.prefetcher, telemetry)
    return use_case, steps


@pytest.fixture
def real_use_case(paths, telemetry, fake_build_tool):
    build_tool = fake_build_tool(manifest={"name": "Pkg"})
    use_case = InitProjectUseCase(
        paths,
        Scaffolder(paths, telemetry, ManifestIntrospector(build_tool), EnvironmentCreator(paths)),
        GitIgnoreUpdater(paths, telemetry),
        DependencyPrefetcher(build_tool, telemetry),
        telemetry,
    )
    return use_case, build_tool


class TestPrecondition:
    @pytest.mark.parametrize("existing", ["Flockfile.swift", ".flock"])
    def test_existing_root_artifact_blocks_without_mutation(
        self, paths, telemetry, snapshot, existing
    ) -> None:
        target = paths.root / existing
        if existing == ".flock":
            target.mkdir()
        else:
            target.write_text("// mine\n", encoding="utf-8")
        paths.gitignore.write_text("*.o\n", encoding="utf-8")
        before = snapshot(paths.root)
        use_case, steps = _mocked_use_case(paths, telemetry)

        with pytest.raises(AlreadyInitialized, match=f"{existing} must not already exist"):
            use_case.execute()

        assert snapshot(paths.root) == before
        steps.scaffolder.scaffold.assert_not_called()
        steps.gitignore_updater.update.assert_not_called()
        steps.prefetcher.build.assert_not_called()

    def test_real_components_leave_tree_untouched(self, paths, real_use_case, snapshot) -> None:
        paths.flockfile.write_text("// mine\n", encoding="utf-8")
        before = snapshot(paths.root)
        use_case, build_tool = real_use_case

        with pytest.raises(AlreadyInitialized):
            use_case.execute()

        assert snapshot(paths.root) == before
        assert build_tool.calls == []


class TestOrdering:
    def test_steps_run_in_order(self, paths, telemetry) -> None:
        use_case, steps = _mocked_use_case(paths, telemetry)

        report = use_case.execute()

        assert steps.mock_calls[:3] == [
            call.scaffolder.scaffold(),
            call.gitignore_updater.update(),
            call.prefetcher.build(),
        ]
        assert report.gitignore.value is True
        assert not report.prefetch.ok
        telemetry.success.assert_called_once_with("Successfully initialized Flock!")

    def test_scaffold_failure_aborts_remaining_steps(self, paths, telemetry) -> None:
        use_case, steps = _mocked_use_case(paths, telemetry)
        steps.scaffolder.scaffold.side_effect = OperationFailed("Couldn't create directory deploy")

        with pytest.raises(OperationFailed):
            use_case.execute()

        steps.gitignore_updater.update.assert_not_called()
        steps.prefetcher.build.assert_not_called()
        telemetry.success.assert_not_called()

    def test_gitignore_failure_is_fatal(self, paths, telemetry) -> None:
        use_case, steps = _mocked_use_case(paths, telemetry)
        steps.gitignore_updater.update.side_effect = OperationFailed("Couldn't open .gitignore stream")

        with pytest.raises(OperationFailed, match="gitignore"):
            use_case.execute()

        steps.prefetcher.build.assert_not_called()

    def test_instructions_reference_generated_paths(self, paths, telemetry) -> None:
        use_case, _ = _mocked_use_case(paths, telemetry)
        use_case.execute()

        title, lines = telemetry.instructions.call_args.args
        assert title == "Follow these steps to finish setting up Flock:"
        assert lines == [
            '1. Add `exclude: ["Flockfile.swift"]` to the end of your Package.swift',
            "2. Update the required fields in deploy/Always.swift",
            "3. Add your servers to deploy/Production.swift and deploy/Staging.swift",
        ]


class TestEndToEnd:
    def test_full_run(self, paths, real_use_case) -> None:
        paths.gitignore.write_text(".build/\n", encoding="utf-8")
        use_case, build_tool = real_use_case

        report = use_case.execute()

        assert paths.flockfile.is_file()
        assert paths.deploy_directory.is_dir()
        assert paths.flock_directory.is_dir()
        assert "# Flock" in paths.gitignore.read_text(encoding="utf-8")
        assert build_tool.calls == ["query_manifest", "build(silent=True)"]
        assert report.scaffold.introspection.ok
        assert report.gitignore.value is True
        assert not report.prefetch.ok

    def test_full_run_without_gitignore(self, paths, real_use_case) -> None:
        use_case, _ = real_use_case

        report = use_case.execute()

        assert report.gitignore.ok and report.gitignore.value is False
        assert not paths.gitignore.exists()

    def test_second_run_is_blocked(self, paths, real_use_case) -> None:
        use_case, _ = real_use_case
        use_case.execute()
        with pytest.raises(AlreadyInitialized):
            use_case.execute()
