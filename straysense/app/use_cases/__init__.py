"""
Use Cases

Organized by area:
- auth/: signup, login, credential validation, logout
- users/: own profile
- animals/, shelters/, reports/, vaccinations/: resource management
- adoptions/: adoption workflow
- admin/: admin credential and dashboard
"""
