from recipe_api.main import run

run()
