"""QR Attendance package.

Organized by feature modules (attendance, employees, timesheets, qr, health)
with a thin Flask controller layer over service/repository layers. All
persistent state lives in Odoo and is reached through JSON-RPC.
"""
