import os
from configparser import ConfigParser

#the biggest 64bit prime
P = 0xffffffffffffffc5
G = 0x0000000000000005

MASK32 = 0xffffffff
MASK64 = 0xffffffffffffffff

#same as the c library rand()
RAND_MAX = 0x7fffffff

ErrCode = {
    'SCPStatusOK'             : 200,  #表示连接成功
    'SCPStatusUnauthorized'   : 401,  #表示 HMAC 计算错误
    'SCPStatusExpired'        : 403,  #表示 Index 已经使用过
    'SCPStatusIDNotFound'     : 404,  #表示连接 id 已经无效
    'SCPStatusNotAcceptable'  : 406,  #表示 cache 的数据流不够
}

#shipped conf next to the module, then the working directory
CONF_FILES = [os.path.join(os.path.dirname(os.path.abspath(__file__)), 'conf'), 'conf']

config = ConfigParser()
config.read(CONF_FILES)
