""" Test package for fnkit. Each module tests the library module of the same name. """
