pytest_plugins = ("nestpath.testing",)
