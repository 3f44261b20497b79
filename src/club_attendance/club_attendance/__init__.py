"""Club Attendance package.

This package is organized by feature modules (meetings, attendance) with a
thin Flask controller layer over store/repository layers. Each repository
contract has a MongoDB variant and a flat JSON file variant, selected once at
startup by the container.
"""
