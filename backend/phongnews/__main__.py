from phongnews.main import run

run()
