from filedrop.main import run

run()
