"""
Post policies decide whether grades entered for an assignment are released
to students right away or held until an instructor posts them.

Each course has one default policy. An assignment may carry its own policy,
which overrides the course default for that assignment only.
"""
