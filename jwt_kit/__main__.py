from jwt_kit.cli.main import run

run()
