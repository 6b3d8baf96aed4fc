"""timepay package.

Attendance and payroll arithmetic for the ISP operations back office, organized
by feature modules (attendance, payroll, ledger, ...). Services talk to storage
through repository protocols; calculators are pure.
"""
