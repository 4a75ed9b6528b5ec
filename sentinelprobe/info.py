def parse_info(text):
    """Parse an INFO payload into a dict of field name to raw string value.

    Lines without a ':' (section headers, blank lines) are skipped. A value
    may itself contain ':'; only the first one separates key from value. If a
    key repeats, the last line wins.
    """
    fields = {}
    for line in text.splitlines():
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        fields[key] = value
    return fields
