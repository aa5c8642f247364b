"""Project Euler problems written as parameterised functions."""