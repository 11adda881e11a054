"""Staff operations package for a moving company.

Organized by feature modules (employees, attendance, bonus, ...) with a thin
Flask controller layer on top of service/repository layers. The bonus engine
in ``bonus.calculator`` is a pure function of a month snapshot.
"""
