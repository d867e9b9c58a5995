from portreview.cli import run

run()
