from kubedeck.main import run

run()
