# Step definitions are shared by every feature file in the project.
pytest_plugins = ["editortesting.steps"]
