"""Medal prerequisite graph layout backend."""
