"""Worked Python examples of the ideas the exercises teach."""