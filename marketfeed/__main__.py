from marketfeed.cli.main import run

run()
