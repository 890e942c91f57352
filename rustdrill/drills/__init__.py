"""Worked solutions to the exercises, as plain Python modules."""