"""Allow running as ``python -m pipelinecraft``."""

from pipelinecraft.cli import main

if __name__ == "__main__":
    main()
