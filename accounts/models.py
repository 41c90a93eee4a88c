from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


class CustomUserManager(BaseUserManager):
    """Custom user manager where email is the unique identifier"""

    def create_user(self, email, password=None, **extra_fields):
        """Create and save a regular user with the given email and password"""
        if not email:
            raise ValueError('The Email field must be set')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """Create and save a superuser with the given email and password"""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('is_admin', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Custom user model with email as username field"""

    username = None  # Remove username field
    email = models.EmailField(unique=True, db_index=True)
    is_admin = models.BooleanField(default=False, help_text='Designates whether the user is a super admin')
    is_employee = models.BooleanField(default=False, help_text='Designates whether the user is an employee')
    is_candidate = models.BooleanField(default=False, help_text='Designates whether the user is a job candidate')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.email

    @property
    def employee_profile(self):
        """Get employee profile if user is an employee"""
        if not self.is_employee:
            return None
        if hasattr(self, '_employee_profile_cache'):
            return self._employee_profile_cache

        from employees.models import Employee

        employee = Employee.objects.filter(user_id=self.id).first()
        self._employee_profile_cache = employee
        return employee

    def has_system_role(self, *roles):
        return self.roles.filter(role__in=roles, is_active=True).exists()


class SystemRole(models.TextChoices):
    DEPARTMENT_EMPLOYEE = 'department employee', 'Department Employee'
    DEPARTMENT_HEAD = 'department head', 'Department Head'
    HR_MANAGER = 'HR Manager', 'HR Manager'
    HR_EMPLOYEE = 'HR Employee', 'HR Employee'
    PAYROLL_SPECIALIST = 'Payroll Specialist', 'Payroll Specialist'
    PAYROLL_MANAGER = 'Payroll Manager', 'Payroll Manager'
    SYSTEM_ADMIN = 'System Admin', 'System Admin'
    JOB_CANDIDATE = 'Job Candidate', 'Job Candidate'


class UserRole(models.Model):
    """A system role held by a user. One row per role."""

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='roles')
    role = models.CharField(max_length=40, choices=SystemRole.choices, db_index=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'user_roles'
        verbose_name = 'User Role'
        verbose_name_plural = 'User Roles'
        unique_together = [['user', 'role']]
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['role', 'is_active'], name='user_roles_role_1c5e0d_idx'),
        ]

    def __str__(self):
        return f"{self.user.email} - {self.role}"
