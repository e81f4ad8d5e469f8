"""JCE structures for registration, push, and server-list messages.

Each structure is a dataclass. Each field carries its JCE tag and how it is
encoded, and that drives both encoding and decoding.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from .decoder import JceReader
from .encoder import JceWriter

_SPEC = "jce"


@dataclass(frozen=True)
class _Kind:
    """How one field is written, read back and defaulted."""

    write: Callable[[JceWriter, Any, int], object]
    read: Optional[Callable[[JceReader, int], Any]]
    default: Callable[[], Any]


def _or(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def _decode_text(raw: Optional[bytes]) -> str:
    return (raw or b"").decode("utf-8", errors="surrogateescape")


_BYTE = _Kind(JceWriter.write_byte, JceReader.read_byte, int)
_INT16 = _Kind(JceWriter.write_int16, JceReader.read_int16, int)
_INT32 = _Kind(JceWriter.write_int32, JceReader.read_int32, int)
_INT64 = _Kind(JceWriter.write_int64, JceReader.read_int64, int)
_STRING = _Kind(JceWriter.write_string, JceReader.read_string, str)
_BYTES = _Kind(
    JceWriter.write_bytes,
    lambda r, t: _or(r.read_bytes(t), b""),
    bytes,
)
# Written as a string but read back from a byte-list field.
_BYTES_AS_STRING = _Kind(
    JceWriter.write_string,
    lambda r, t: _decode_text(r.read_bytes(t)),
    str,
)
_INT64_LIST = _Kind(JceWriter.write_int64_list, None, list)
_BYTES_LIST = _Kind(
    JceWriter.write_bytes_list,
    lambda r, t: [_or(b, b"") for b in _or(r.read_byte_arr_arr(t), [])],
    list,
)
_MAP_STR_STR = _Kind(
    JceWriter.write_map_str_str,
    lambda r, t: _or(r.read_map_str_str(t), {}),
    dict,
)
_MAP_STR_BYTES = _Kind(
    JceWriter.write_map_str_bytes,
    lambda r, t: {k: _or(v, b"") for k, v in _or(r.read_map_str_bytes(t), {}).items()},
    dict,
)
_MAP_STR_MAP_STR_BYTES = _Kind(
    JceWriter.write_map_str_map_str_bytes,
    lambda r, t: {
        k: {kk: _or(vv, b"") for kk, vv in _or(v, {}).items()}
        for k, v in _or(r.read_map_str_map_str_bytes(t), {}).items()
    },
    dict,
)


def _struct(cls: Callable[[], Any]) -> _Kind:
    return _Kind(
        JceWriter.write_struct,
        lambda r, t: r.read_struct(cls(), t),
        cls,
    )


def _struct_list(cls: Callable[[], Any]) -> _Kind:
    return _Kind(
        JceWriter.write_struct_list,
        lambda r, t: _or(r.read_struct_list(cls, t), []),
        list,
    )


def _jce(tag: int, kind: _Kind, *, read: bool = True) -> Any:
    """Declare a dataclass field bound to a JCE tag."""
    return field(default_factory=kind.default, metadata={_SPEC: (tag, kind, read)})


@dataclass
class JceStruct:
    """Base of all JCE structures: fields are encoded in declaration order."""

    @classmethod
    def _specs(cls) -> Iterator[tuple[str, int, _Kind, bool]]:
        for f in fields(cls):
            spec = f.metadata.get(_SPEC)
            if spec is not None:
                tag, kind, readable = spec
                yield f.name, tag, kind, readable

    def to_bytes(self) -> bytes:
        """Encode the fields, without struct begin and end markers."""
        writer = JceWriter()
        for name, tag, kind, _ in self._specs():
            kind.write(writer, getattr(self, name), tag)
        return writer.to_bytes()

    def read_from(self, reader: JceReader) -> None:
        """Fill the readable fields from ``reader``."""
        for name, tag, kind, readable in self._specs():
            if readable and kind.read is not None:
                setattr(self, name, kind.read(reader, tag))


@dataclass
class RequestPacket(JceStruct):
    version: int = _jce(1, _INT16)
    packet_type: int = _jce(2, _BYTE)
    message_type: int = _jce(3, _INT32)
    request_id: int = _jce(4, _INT32)
    servant_name: str = _jce(5, _STRING)
    func_name: str = _jce(6, _STRING)
    buffer: bytes = _jce(7, _BYTES)
    timeout: int = _jce(8, _INT32)
    context: dict = _jce(9, _MAP_STR_STR)
    status: dict = _jce(10, _MAP_STR_STR)


@dataclass
class RequestDataVersion3(JceStruct):
    data: dict = _jce(0, _MAP_STR_BYTES)


@dataclass
class RequestDataVersion2(JceStruct):
    data: dict = _jce(0, _MAP_STR_MAP_STR_BYTES)


@dataclass
class SsoServerInfo(JceStruct):
    server: str = _jce(1, _STRING)
    port: int = _jce(2, _INT32)
    location: str = _jce(8, _STRING)


@dataclass
class FileStorageServerInfo(JceStruct):
    server: str = _jce(1, _STRING)
    port: int = _jce(2, _INT32)


@dataclass
class BigDataIPInfo(JceStruct):
    type: int = _jce(0, _INT64)
    server: str = _jce(1, _STRING)
    port: int = _jce(2, _INT64)


@dataclass
class BigDataIPList(JceStruct):
    service_type: int = _jce(0, _INT64)
    ip_list: list = _jce(1, _struct_list(BigDataIPInfo))
    fragment_size: int = _jce(3, _INT64)


@dataclass
class BigDataChannel(JceStruct):
    ip_lists: list = _jce(0, _struct_list(BigDataIPList))
    sig_session: bytes = _jce(1, _BYTES)
    key_session: bytes = _jce(2, _BYTES)
    sig_uin: int = _jce(3, _INT64)
    connect_flag: int = _jce(4, _INT32)
    pb_buf: bytes = _jce(5, _BYTES)


@dataclass
class FileStoragePushFSSvcList(JceStruct):
    upload_list: list = _jce(0, _struct_list(FileStorageServerInfo))
    pic_download_list: list = _jce(1, _struct_list(FileStorageServerInfo))
    g_pic_download_list: list = _jce(2, _struct_list(FileStorageServerInfo))
    qzone_proxy_service_list: list = _jce(3, _struct_list(FileStorageServerInfo))
    url_encode_service_list: list = _jce(4, _struct_list(FileStorageServerInfo))
    big_data_channel: BigDataChannel = _jce(5, _struct(BigDataChannel))
    vip_emotion_list: list = _jce(6, _struct_list(FileStorageServerInfo))
    c2c_pic_down_list: list = _jce(7, _struct_list(FileStorageServerInfo))
    ptt_list: bytes = _jce(10, _BYTES)


@dataclass
class SvcReqRegister(JceStruct):
    uin: int = _jce(0, _INT64)
    bid: int = _jce(1, _INT64)
    conn_type: int = _jce(2, _BYTE)
    other: str = _jce(3, _STRING)
    status: int = _jce(4, _INT32)
    online_push: int = _jce(5, _BYTE)
    is_online: int = _jce(6, _BYTE)
    is_show_online: int = _jce(7, _BYTE)
    kick_pc: int = _jce(8, _BYTE)
    kick_weak: int = _jce(9, _BYTE)
    timestamp: int = _jce(10, _INT64)
    ios_version: int = _jce(11, _INT64)
    net_type: int = _jce(12, _BYTE)
    build_ver: str = _jce(13, _STRING)
    reg_type: int = _jce(14, _BYTE)
    dev_param: bytes = _jce(15, _BYTES)
    guid: bytes = _jce(16, _BYTES)
    locale_id: int = _jce(17, _INT32)
    silent_push: int = _jce(18, _BYTE)
    dev_name: str = _jce(19, _STRING)
    dev_type: str = _jce(20, _STRING)
    os_ver: str = _jce(21, _STRING)
    open_push: int = _jce(22, _BYTE)
    large_seq: int = _jce(23, _INT64)
    last_watch_start_time: int = _jce(24, _INT64)
    old_sso_ip: int = _jce(26, _INT64)
    new_sso_ip: int = _jce(27, _INT64)
    channel_no: str = _jce(28, _STRING)
    cpid: int = _jce(29, _INT64)
    vendor_name: str = _jce(30, _STRING)
    vendor_os_name: str = _jce(31, _STRING)
    ios_idfa: str = _jce(32, _STRING)
    b769: bytes = _jce(33, _BYTES)
    is_set_status: int = _jce(34, _BYTE)
    server_buf: bytes = _jce(35, _BYTES)
    set_mute: int = _jce(36, _BYTE)
    ext_online_status: int = _jce(38, _INT64)
    battery_status: int = _jce(39, _INT32)


@dataclass
class SvcRespRegister(JceStruct):
    uin: int = _jce(0, _INT64)
    bid: int = _jce(1, _INT64)
    reply_code: int = _jce(2, _BYTE)
    result: str = _jce(3, _STRING)
    server_time: int = _jce(4, _INT64)
    log_qq: int = _jce(5, _BYTE)
    need_kik: int = _jce(6, _BYTE)
    update_flag: int = _jce(7, _BYTE)
    timestamp: int = _jce(8, _INT64)
    crash_flag: int = _jce(9, _BYTE)
    client_ip: str = _jce(10, _STRING)
    client_port: int = _jce(11, _INT32)
    hello_interval: int = _jce(12, _INT32)
    large_seq: int = _jce(13, _INT32)
    large_seq_update: int = _jce(14, _BYTE)
    d769_rsp_body: bytes = _jce(15, _BYTES)
    status: int = _jce(16, _INT32)
    ext_online_status: int = _jce(17, _INT64)
    client_battery_get_interval: int = _jce(18, _INT64, read=False)
    client_auto_status_interval: int = _jce(19, _INT64, read=False)


@dataclass
class SvcReqGetMsgV2(JceStruct):
    uin: int = _jce(0, _INT64)
    date_time: int = _jce(1, _INT32)
    recive_pic: int = _jce(4, _BYTE)
    ability: int = _jce(6, _INT16)
    channel: int = _jce(9, _BYTE)
    inst: int = _jce(16, _BYTE)
    channel_ex: int = _jce(17, _BYTE)
    sync_cookie: bytes = _jce(18, _BYTES)
    sync_flag: int = _jce(19, _INT64)
    ramble_flag: int = _jce(20, _BYTE)
    general_abi: int = _jce(26, _INT64)
    pub_account_cookie: bytes = _jce(27, _BYTES)


@dataclass
class PullGroupSeqParam(JceStruct):
    group_code: int = _jce(0, _INT64)
    last_seq_id: int = _jce(1, _INT64)


@dataclass
class SvcReqPullGroupMsgSeq(JceStruct):
    group_info: list = _jce(0, _struct_list(PullGroupSeqParam))
    verify_type: int = _jce(1, _BYTE)
    filter: int = _jce(2, _INT32)


@dataclass
class SvcReqRegisterNew(JceStruct):
    request_optional: int = _jce(0, _INT64)
    c2c_msg: SvcReqGetMsgV2 = _jce(1, _struct(SvcReqGetMsgV2))
    group_msg: SvcReqPullGroupMsgSeq = _jce(2, _struct(SvcReqPullGroupMsgSeq))
    dis_group_msg_filter: int = _jce(14, _BYTE)
    group_mask: int = _jce(15, _BYTE)
    end_seq: int = _jce(16, _INT64)
    o769_body: bytes = _jce(20, _BYTES)


@dataclass
class OnlineInfo(JceStruct):
    instance_id: int = _jce(0, _INT32)
    client_type: int = _jce(1, _INT32)
    online_status: int = _jce(2, _INT32)
    platform_id: int = _jce(3, _INT32)
    sub_platform: str = _jce(4, _BYTES_AS_STRING)
    u_client_type: int = _jce(5, _INT64)


@dataclass
class SvcRespParam(JceStruct):
    pc_stat: int = _jce(0, _INT32)
    is_support_c2c_roam_msg: int = _jce(1, _INT32)
    is_support_data_line: int = _jce(2, _INT32)
    is_support_printable: int = _jce(3, _INT32)
    is_support_view_pc_file: int = _jce(4, _INT32)
    pc_version: int = _jce(5, _INT32)
    roam_flag: int = _jce(6, _INT64)
    online_infos: list = _jce(7, _struct_list(OnlineInfo))
    pc_client_type: int = _jce(8, _INT32)


@dataclass
class RequestPushNotify(JceStruct):
    uin: int = _jce(0, _INT64)
    type: int = _jce(1, _BYTE)
    service: str = _jce(2, _STRING)
    cmd: str = _jce(3, _STRING)
    notify_cookie: bytes = _jce(4, _BYTES)
    msg_type: int = _jce(5, _INT32)
    user_active: int = _jce(6, _INT32)
    general_flag: int = _jce(7, _INT32)
    binded_uin: int = _jce(8, _INT64)


@dataclass
class InstanceInfo(JceStruct):
    app_id: int = _jce(0, _INT32)
    tablet: int = _jce(1, _BYTE)
    platform: int = _jce(2, _INT64)
    product_type: int = _jce(3, _INT64)
    client_type: int = _jce(4, _INT64)


@dataclass
class SvcReqMSFLoginNotify(JceStruct):
    app_id: int = _jce(0, _INT64)
    status: int = _jce(1, _BYTE)
    tablet: int = _jce(2, _BYTE)
    platform: int = _jce(3, _INT64)
    title: str = _jce(4, _STRING)
    info: str = _jce(5, _STRING)
    product_type: int = _jce(6, _INT64)
    client_type: int = _jce(7, _INT64)
    instance_list: list = _jce(8, _struct_list(InstanceInfo))


@dataclass
class PushMessageInfo(JceStruct):
    from_uin: int = _jce(0, _INT64)
    msg_time: int = _jce(1, _INT64)
    msg_type: int = _jce(2, _INT16)
    msg_seq: int = _jce(3, _INT16)
    msg: str = _jce(4, _STRING)
    real_msg_time: int = _jce(5, _INT32, read=False)
    v_msg: bytes = _jce(6, _BYTES)
    app_share_id: int = _jce(7, _INT64, read=False)
    msg_cookies: bytes = _jce(8, _BYTES)
    app_share_cookie: bytes = _jce(9, _BYTES, read=False)
    msg_uid: int = _jce(10, _INT64)
    last_change_time: int = _jce(11, _INT64, read=False)
    from_inst_id: int = _jce(14, _INT64, read=False)
    remark_of_sender: bytes = _jce(15, _BYTES, read=False)
    from_mobile: str = _jce(16, _STRING)
    from_name: str = _jce(17, _STRING)


@dataclass
class DelMsgInfo(JceStruct):
    from_uin: int = _jce(0, _INT64)
    msg_time: int = _jce(1, _INT64)
    msg_seq: int = _jce(2, _INT16)
    msg_cookies: bytes = _jce(3, _BYTES)
    cmd: int = _jce(4, _INT16)
    msg_type: int = _jce(5, _INT64)
    app_id: int = _jce(6, _INT64)
    send_time: int = _jce(7, _INT64)
    sso_seq: int = _jce(8, _INT32)
    sso_ip: int = _jce(9, _INT32)
    client_ip: int = _jce(10, _INT32)


@dataclass
class SvcRespPushMsg(JceStruct):
    uin: int = _jce(0, _INT64)
    del_infos: list = _jce(1, _struct_list(DelMsgInfo))
    svrip: int = _jce(2, _INT32)
    push_token: bytes = _jce(3, _BYTES)
    service_type: int = _jce(4, _INT32)


@dataclass
class SvcReqGetDevLoginInfo(JceStruct):
    guid: bytes = _jce(0, _BYTES)
    app_name: str = _jce(1, _STRING)
    login_type: int = _jce(2, _INT64)
    timestamp: int = _jce(3, _INT64)
    next_item_index: int = _jce(4, _INT64)
    require_max: int = _jce(5, _INT64)
    # 1: login devices, 2: recent login devices, 4: authorised login devices
    get_dev_list_type: int = _jce(6, _INT64)


@dataclass
class SvcDevLoginInfo(JceStruct):
    app_id: int = _jce(0, _INT64)
    guid: bytes = _jce(1, _BYTES)
    login_time: int = _jce(2, _INT64)
    login_platform: int = _jce(3, _INT64)
    login_location: str = _jce(4, _STRING)
    device_name: str = _jce(5, _STRING)
    device_type_info: str = _jce(6, _STRING)
    ter_type: int = _jce(8, _INT64)
    product_type: int = _jce(9, _INT64)
    can_be_kicked: int = _jce(10, _INT64)