"""Shared inline diffs for core unit tests"""

import pytest


BACK_TO_BACK_DIFF = """\
--- a.txt
+++ a.txt
@@ -1 +1 @@
-old
+new
--- b.txt
+++ b.txt
@@ -1 +1 @@
-x
+y
"""

ONE_LINE_HUNKS_DIFF = """\
--- /dev/null
+++ added.txt
@@ -0,0 +1 @@
+only
--- removed.txt
+++ /dev/null
@@ -1 +0,0 @@
-gone
"""

BLANK_DELIMITED_DIFF = """\
--- a.txt
+++ a.txt
@@ -1,4 +1,4 @@
 one
-two
+2

 four

--- b.txt
+++ b.txt
@@ -1 +1 @@
-x
+y
"""


@pytest.fixture(name="back_to_back_lines")
def back_to_back_lines_fixture():
    return BACK_TO_BACK_DIFF.splitlines()


@pytest.fixture(name="one_line_hunks_lines")
def one_line_hunks_lines_fixture():
    return ONE_LINE_HUNKS_DIFF.splitlines()


@pytest.fixture(name="blank_delimited_lines")
def blank_delimited_lines_fixture():
    return BLANK_DELIMITED_DIFF.splitlines()
