import re


def snake_case_to_camel_case(value):
    return value[0].lower() + re.sub(r"_(.)", lambda match: match.group(1).upper(), value[1:]).rstrip("_")


def upper_first(value):
    return value[:1].upper() + value[1:]


def payload_type_name(operation_name, type_name):
    # removeById, User -> RemoveByIdUserPayload
    return "{}{}Payload".format(upper_first(operation_name), type_name)
