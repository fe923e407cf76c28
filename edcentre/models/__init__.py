# Re-export common types
from .admin import Admin
from .record import Record
from .repository import Repository
from .role import Role
from .student import Student
from .teacher import Teacher
from .variants import VARIANTS, create

__all__ = [
    "Record",
    "Role",
    "Teacher",
    "Admin",
    "Student",
    "VARIANTS",
    "create",
    "Repository",
]
