"""Classroom Attendance package.

Feature modules (sessions, attendance, users) each carry a model, a service
and a thin Flask controller; persistence goes through the ``storage`` layer
so the JSON document and the MySQL backend are interchangeable.
"""
