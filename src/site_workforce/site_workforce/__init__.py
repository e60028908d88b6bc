"""Site Workforce package.

Construction-site workforce administration: employees, daily attendance,
wages net of cash advances and attendance reports. Organized by feature
module (profiles, employees, attendance, advances, payroll, reports) with a
thin Flask controller layer over service/repository layers.
"""
