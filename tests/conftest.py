"""Root test configuration: sample Org files on disk"""

import pytest


PROJECT_ORG = """\
* TODO [#A] Plan the release :project:
  DEADLINE: <2024-05-01 Wed>
** NEXT Draft /announcement/ notes
** DONE Tag [[https://example.org][v1.0]]
   CLOSED: [2024-04-20 Sat 10:00]

Some body text with ~code~.
"""

NOTES_ORG = """\
* Reading list :books:
  :PROPERTIES:
  :AUTHOR: Knuth
  :END:
"""


@pytest.fixture(name="org_tree")
def org_tree_fixture(tmp_path):
    """A directory with two .org files (one nested) and one file to ignore."""
    (tmp_path / "project.org").write_text(PROJECT_ORG, encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "notes.org").write_text(NOTES_ORG, encoding="utf-8")
    (tmp_path / "readme.md").write_text("# Not org\n", encoding="utf-8")
    return tmp_path
