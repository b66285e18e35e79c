import requests

from onfido.log_utils import network_wait


def post(url, data=None, json=None, **kwargs):
    with network_wait(url):
        return requests.post(url, data, json, **kwargs)


def get(url, params=None, **kwargs):
    with network_wait(url):
        return requests.get(url, params, **kwargs)


Response = requests.Response
HTTPError = requests.HTTPError
RequestException = requests.RequestException
codes = requests.codes
