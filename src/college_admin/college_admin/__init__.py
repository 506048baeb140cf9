"""College administration package.

Feature modules (leaves, attendance, students, notifications) each keep a pure
domain core, a repository interface with a MySQL implementation, a service
layer and a thin Flask controller.
"""
