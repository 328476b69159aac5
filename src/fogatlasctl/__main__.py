from fogatlasctl.cli import run

run()
