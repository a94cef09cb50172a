import serialization
from common import ErrCode

def calc_sum(content, secret):
    hash_data = serialization.hashc(bytes(content,"utf-8"))
    return serialization.hmac(hash_data,secret)


class ReuseConnReq(object):
    def __init__(self,id,handshakes,received,sum=0):
        self.id = id
        #reuse times
        self.handshakes = handshakes
        self.received = received
        self.sum = sum

    def content(self):
        return "{:d}\n{:d}\n{:d}\n".format(self.id, self.handshakes, self.received)

    def calc_sum(self,secret):
        return calc_sum(self.content(),secret)

    def fill_sum(self,secret):
        self.sum = self.calc_sum(secret)

    def verify_sum(self,secret):
        return self.calc_sum(secret) == self.sum


class ReuseConnResp(object):
    def __init__(self,received=0,code=ErrCode['SCPStatusOK'],sum=0):
        self.received = received
        self.code = code
        self.sum = sum

    def content(self):
        return "{:d}\n{:d}\n".format(self.received, self.code)

    def calc_sum(self,secret):
        return calc_sum(self.content(),secret)

    def fill_sum(self,secret):
        self.sum = self.calc_sum(secret)

    def verify_sum(self,secret):
        return self.calc_sum(secret) == self.sum
