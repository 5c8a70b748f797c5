def HexString(data : bytes) -> str:
    """
    Lowercase hex representation of the bytes, two digits per byte
    """
    return data.hex()

def Utf8String(data : bytes) -> str:
    """
    Decode the bytes as UTF-8, or return an empty string if they are not valid UTF-8
    """
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return ""
