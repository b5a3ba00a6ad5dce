"""Run the animator demo with `python -m animator`."""

from animator.main import main

main()
