import base64
from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

def AppendQueryItem(url : str, name : str, value : str|None) -> str:
    """
    Add a query string parameter to a URL, keeping any existing parameters.
    A None value adds the name without a value.
    """
    parts = urlsplit(url)
    item = urlencode({name: value}) if value is not None else quote_plus(name)
    query = f"{parts.query}&{item}" if parts.query else item
    return urlunsplit(parts._replace(query=query))

def GetQueryParameter(url : str, name : str) -> str|None:
    """
    Get the value of the first query string parameter with the given name, if there is one
    """
    query = urlsplit(url).query
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key == name:
            return value
    return None

def BasicAuthHeader(username : str, password : str) -> dict[str, str]:
    """
    HTTP header for basic authentication with the given credentials
    """
    credentials = base64.b64encode(f"{username}:{password}".encode('utf-8')).decode('ascii')
    return {'Authorization': f"Basic {credentials}"}
