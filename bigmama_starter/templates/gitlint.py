"""gitlint configuration written for Python projects.

Enforces conventional commit titles between 5 and 100 characters.
"""

GITLINT_FILE = ".gitlint"

GITLINT_CONFIG = """
[general]
ignore=B6
contrib=contrib-title-conventional-commits
regex-style-search=true
# This is an example of how to configure the "title-max-length" rule and
# set the line-length it enforces to 50
[title-max-length]
line-length=100

# Conversely, you can also enforce minimal length of a title with the
# "title-min-length" rule:
[title-min-length]
min-length=5

[author-valid-email]
# python-style regex that the commit author email address must match.
# For example, use the following regex if you only want to allow email addresses from foo.com
regex=[^@]+@big-mama.io

[ignore-by-title]
# Ignore certain rules for commits of which the title matches a regex
# E.g. Match commit titles that start with "Release"
regex=^Release(.*)

# This is a contrib rule - a community contributed rule. These are disabled by default.
# You need to explicitly enable them one-by-one by adding them to the "contrib" option
# under [general] section above.
[contrib-title-conventional-commits]
# Specify allowed commit types. For details see: https://www.conventionalcommits.org/
types = fix,feat,chore,docs,style,refactor,perf,test,revert,ci,build
"""

__all__ = ["GITLINT_CONFIG", "GITLINT_FILE"]
