"""mutation_pipeline.runner

Run the fixed per-pairing pipeline:

  initialize -> initial test (timeout budget) -> build mutation process -> mutate

Each call gets a fresh initialisation process and its own
:class:`MutationTestInput`. Failures propagate unchanged; there is no retry
at this level.
"""

from __future__ import annotations

import logging
from typing import Any

from mutation_pipeline.interfaces import (
    InitialisationProcessProvider,
    MutationTestProcess,
    MutationTestProcessProvider,
)
from mutation_pipeline.models import MutationTestExecutor, PipelineStage, WorkspaceOptions


class PipelineRunner:
    def __init__(
        self,
        *,
        initialisation_process_provider: InitialisationProcessProvider,
        mutation_test_process_provider: MutationTestProcessProvider,
        logger: logging.Logger,
    ) -> None:
        self._initialisation_process_provider = initialisation_process_provider
        self._mutation_test_process_provider = mutation_test_process_provider
        self._logger = logger

    def run_one(self, options: WorkspaceOptions, reporter: Any) -> MutationTestProcess:
        target = options.project_under_test or options.base_path

        initialisation_process = self._initialisation_process_provider.provide()
        mutation_test_input = initialisation_process.initialize(options)
        mutation_test_input.stage = PipelineStage.INITIALISED
        self._logger.debug("Initialised %s", target)

        mutation_test_input.timeout_ms = initialisation_process.initial_test(mutation_test_input, options)
        mutation_test_input.stage = PipelineStage.CALIBRATED
        self._logger.debug("Initial test of %s done, timeout budget %s ms", target, mutation_test_input.timeout_ms)

        process = self._mutation_test_process_provider.provide(
            mutation_test_input=mutation_test_input,
            reporter=reporter,
            mutation_test_executor=MutationTestExecutor(mutation_test_input.test_runner),
            options=options,
        )
        mutation_test_input.stage = PipelineStage.MUTATION_READY

        process.mutate()
        self._logger.debug("Mutation of %s finished", target)
        return process
