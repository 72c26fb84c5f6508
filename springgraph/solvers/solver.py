# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Base solver class for 2D graph layouts


class SolverBase:
    """
    Generic base class for 2D layout solvers.

    Holds the model and defines the interface that concrete solvers
    must implement.
    """

    def __init__(self, model):
        """
        Initialize the solver with a model.

        Args:
            model: The layout Model containing the system description
        """
        self.model = model
        self.step_count = 0

    @property
    def device(self):
        """
        Get the device used by the solver.

        Returns:
            The device used by the solver
        """
        return self.model.device

    def step(self, state, dt: float = None):
        """
        Advance ``state`` in place by one time step.

        Must be implemented by concrete solver subclasses.

        Args:
            state: The state to update
            dt: The time step, defaults to the model's configured step
        """
        raise NotImplementedError("Concrete solvers must implement step()")
