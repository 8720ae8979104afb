import re


def camel_case_to_snake_case(value):
    return re.sub(r"(?<=[a-z0-9])([A-Z])", lambda match: "_" + match.group(1), value).lower()
