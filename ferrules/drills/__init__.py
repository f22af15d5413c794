"""Worked solutions to many of the course exercises."""