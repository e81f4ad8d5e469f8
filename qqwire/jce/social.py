"""JCE structures for friend, group and profile-card messages."""

from __future__ import annotations

from dataclasses import dataclass

from .structs import (
    _BYTE,
    _BYTES,
    _BYTES_LIST,
    _INT16,
    _INT32,
    _INT64,
    _INT64_LIST,
    _STRING,
    JceStruct,
    _jce,
    _struct_list,
)


@dataclass
class FriendListRequest(JceStruct):
    reqtype: int = _jce(0, _INT32)
    if_reflush: int = _jce(1, _BYTE)
    uin: int = _jce(2, _INT64)
    start_index: int = _jce(3, _INT16)
    friend_count: int = _jce(4, _INT16)
    group_id: int = _jce(5, _BYTE)
    if_get_group_info: int = _jce(6, _BYTE)
    group_start_index: int = _jce(7, _BYTE)
    group_count: int = _jce(8, _BYTE)
    if_get_msf_group: int = _jce(9, _BYTE)
    if_show_term_type: int = _jce(10, _BYTE)
    version: int = _jce(11, _INT64)
    uin_list: list = _jce(12, _INT64_LIST)
    app_type: int = _jce(13, _INT32)
    if_get_dov_id: int = _jce(14, _BYTE)
    if_get_both_flag: int = _jce(15, _BYTE)
    d50: bytes = _jce(16, _BYTES)
    d6b: bytes = _jce(17, _BYTES)
    sns_type_list: list = _jce(18, _INT64_LIST)


@dataclass
class FriendInfo(JceStruct):
    friend_uin: int = _jce(0, _INT64)
    group_id: int = _jce(1, _BYTE)
    face_id: int = _jce(2, _INT16)
    remark: str = _jce(3, _STRING)
    qq_type: int = _jce(4, _BYTE, read=False)
    status: int = _jce(5, _BYTE)
    member_level: int = _jce(6, _BYTE)
    is_mqq_online: int = _jce(7, _BYTE, read=False)
    qq_online_state: int = _jce(8, _BYTE, read=False)
    is_iphone_online: int = _jce(9, _BYTE, read=False)
    detail_status_flag: int = _jce(10, _BYTE, read=False)
    qq_online_state_v2: int = _jce(11, _BYTE, read=False)
    show_name: str = _jce(12, _STRING, read=False)
    is_remark: int = _jce(13, _BYTE, read=False)
    nick: str = _jce(14, _STRING)
    special_flag: int = _jce(15, _BYTE, read=False)
    im_group_id: bytes = _jce(16, _BYTES, read=False)
    msf_group_id: bytes = _jce(17, _BYTES, read=False)
    term_type: int = _jce(18, _INT32, read=False)
    network: int = _jce(20, _BYTE)
    ring: bytes = _jce(21, _BYTES, read=False)
    abi_flag: int = _jce(22, _INT64, read=False)
    face_addon_id: int = _jce(23, _INT64, read=False)
    network_type: int = _jce(24, _INT32)
    vip_font: int = _jce(25, _INT64, read=False)
    icon_type: int = _jce(26, _INT32, read=False)
    term_desc: str = _jce(27, _STRING, read=False)
    color_ring: int = _jce(28, _INT64, read=False)
    apollo_flag: int = _jce(29, _BYTE, read=False)
    apollo_timestamp: int = _jce(30, _INT64, read=False)
    sex: int = _jce(31, _BYTE, read=False)
    founder_font: int = _jce(32, _INT64, read=False)
    eim_id: str = _jce(33, _STRING, read=False)
    eim_mobile: str = _jce(34, _STRING, read=False)
    olympic_torch: int = _jce(35, _BYTE, read=False)
    apollo_sign_time: int = _jce(36, _INT64, read=False)
    lavi_uin: int = _jce(37, _INT64, read=False)
    tag_update_time: int = _jce(38, _INT64, read=False)
    game_last_login_time: int = _jce(39, _INT64, read=False)
    game_app_id: int = _jce(40, _INT64, read=False)
    card_id: bytes = _jce(41, _BYTES)
    bit_set: int = _jce(42, _INT64, read=False)
    king_of_glory_flag: int = _jce(43, _BYTE, read=False)
    king_of_glory_rank: int = _jce(44, _INT64, read=False)
    master_uin: str = _jce(45, _STRING, read=False)
    last_medal_update_time: int = _jce(46, _INT64, read=False)
    face_store_id: int = _jce(47, _INT64, read=False)
    font_effect: int = _jce(48, _INT64, read=False)
    dov_id: str = _jce(49, _STRING, read=False)
    both_flag: int = _jce(50, _INT64, read=False)
    centi_show_3d_flag: int = _jce(51, _BYTE, read=False)
    intimate_info: bytes = _jce(52, _BYTES, read=False)
    show_nameplate: int = _jce(53, _BYTE, read=False)
    new_lover_diamond_flag: int = _jce(54, _BYTE, read=False)
    ext_sns_frd_data: bytes = _jce(55, _BYTES, read=False)
    mutual_mark_data: bytes = _jce(56, _BYTES, read=False)


@dataclass
class TroopListRequest(JceStruct):
    uin: int = _jce(0, _INT64)
    get_msf_msg_flag: int = _jce(1, _BYTE)
    cookies: bytes = _jce(2, _BYTES)
    group_info: list = _jce(3, _INT64_LIST)
    group_flag_ext: int = _jce(4, _BYTE)
    version: int = _jce(5, _INT32)
    company_id: int = _jce(6, _INT64)
    version_num: int = _jce(7, _INT64)
    get_long_group_name: int = _jce(8, _BYTE)


@dataclass
class TroopNumber(JceStruct):
    group_uin: int = _jce(0, _INT64)
    group_code: int = _jce(1, _INT64)
    flag: int = _jce(2, _BYTE, read=False)
    group_info_seq: int = _jce(3, _INT64, read=False)
    group_name: str = _jce(4, _STRING)
    group_memo: str = _jce(5, _STRING)
    group_flag_ext: int = _jce(6, _INT64, read=False)
    group_rank_seq: int = _jce(7, _INT64, read=False)
    certification_type: int = _jce(8, _INT64, read=False)
    shut_up_timestamp: int = _jce(9, _INT64, read=False)
    my_shut_up_timestamp: int = _jce(10, _INT64, read=False)
    cmd_uin_uin_flag: int = _jce(11, _INT64, read=False)
    additional_flag: int = _jce(12, _INT64, read=False)
    group_type_flag: int = _jce(13, _INT64, read=False)
    group_sec_type: int = _jce(14, _INT64, read=False)
    group_sec_type_info: int = _jce(15, _INT64, read=False)
    group_class_ext: int = _jce(16, _INT64, read=False)
    app_privilege_flag: int = _jce(17, _INT64, read=False)
    subscription_uin: int = _jce(18, _INT64, read=False)
    member_num: int = _jce(19, _INT64)
    member_num_seq: int = _jce(20, _INT64, read=False)
    member_card_seq: int = _jce(21, _INT64, read=False)
    group_flag_ext3: int = _jce(22, _INT64, read=False)
    group_owner_uin: int = _jce(23, _INT64)
    is_conf_group: int = _jce(24, _BYTE, read=False)
    is_modify_conf_group_face: int = _jce(25, _BYTE, read=False)
    is_modify_conf_group_name: int = _jce(26, _BYTE, read=False)
    cmd_uin_join_time: int = _jce(27, _INT64, read=False)
    company_id: int = _jce(28, _INT64, read=False)
    max_group_member_num: int = _jce(29, _INT64)
    cmd_uin_group_mask: int = _jce(30, _INT64, read=False)
    guild_app_id: int = _jce(31, _INT64, read=False)
    guild_sub_type: int = _jce(32, _INT64, read=False)
    cmd_uin_ringtone_id: int = _jce(33, _INT64, read=False)
    cmd_uin_flag_ex2: int = _jce(34, _INT64, read=False)


@dataclass
class TroopMemberListRequest(JceStruct):
    uin: int = _jce(0, _INT64)
    group_code: int = _jce(1, _INT64)
    next_uin: int = _jce(2, _INT64)
    group_uin: int = _jce(3, _INT64)
    version: int = _jce(4, _INT64)
    req_type: int = _jce(5, _INT64)
    get_list_appoint_time: int = _jce(6, _INT64)
    rich_card_name_ver: int = _jce(7, _BYTE)


@dataclass
class TroopMemberInfo(JceStruct):
    member_uin: int = _jce(0, _INT64)
    face_id: int = _jce(1, _INT16)
    age: int = _jce(2, _BYTE, read=False)
    gender: int = _jce(3, _BYTE)
    nick: str = _jce(4, _STRING)
    status: int = _jce(5, _BYTE, read=False)
    show_name: str = _jce(6, _STRING)
    name: str = _jce(8, _STRING)
    memo: str = _jce(12, _STRING, read=False)
    auto_remark: str = _jce(13, _STRING)
    member_level: int = _jce(14, _INT64)
    join_time: int = _jce(15, _INT64)
    last_speak_time: int = _jce(16, _INT64)
    credit_level: int = _jce(17, _INT64, read=False)
    flag: int = _jce(18, _INT64)
    flag_ext: int = _jce(19, _INT64, read=False)
    point: int = _jce(20, _INT64, read=False)
    concerned: int = _jce(21, _BYTE, read=False)
    shielded: int = _jce(22, _BYTE, read=False)
    special_title: str = _jce(23, _STRING)
    special_title_expire_time: int = _jce(24, _INT64)
    job: str = _jce(25, _STRING, read=False)
    apollo_flag: int = _jce(26, _BYTE, read=False)
    apollo_timestamp: int = _jce(27, _INT64, read=False)
    global_group_level: int = _jce(28, _INT64, read=False)
    title_id: int = _jce(29, _INT64, read=False)
    shut_up_timestamp: int = _jce(30, _INT64)
    global_group_point: int = _jce(31, _INT64, read=False)
    rich_card_name_ver: int = _jce(33, _BYTE, read=False)
    vip_type: int = _jce(34, _INT64, read=False)
    vip_level: int = _jce(35, _INT64, read=False)
    big_club_level: int = _jce(36, _INT64, read=False)
    big_club_flag: int = _jce(37, _INT64, read=False)
    nameplate: int = _jce(38, _INT64, read=False)
    group_honor: bytes = _jce(39, _BYTES, read=False)


@dataclass
class UinInfo(JceStruct):
    uin: int = _jce(0, _INT64)
    flag: int = _jce(1, _INT64)
    name: str = _jce(2, _STRING)
    gender: int = _jce(3, _BYTE)
    phone: str = _jce(4, _STRING)
    email: str = _jce(5, _STRING)
    remark: str = _jce(6, _STRING)


@dataclass
class ModifyGroupCardRequest(JceStruct):
    zero: int = _jce(0, _INT64)
    group_code: int = _jce(1, _INT64)
    new_seq: int = _jce(2, _INT64)
    uin_info: list = _jce(3, _struct_list(UinInfo))


@dataclass
class SummaryCardReq(JceStruct):
    uin: int = _jce(0, _INT64)
    come_from: int = _jce(1, _INT32)
    qzone_feed_timestamp: int = _jce(2, _INT64)
    is_friend: int = _jce(3, _BYTE)
    group_code: int = _jce(4, _INT64)
    group_uin: int = _jce(5, _INT64)
    get_control: int = _jce(8, _INT64)
    add_friend_source: int = _jce(9, _INT32)
    secure_sig: bytes = _jce(10, _BYTES)
    req_services: list = _jce(14, _BYTES_LIST)
    tiny_id: int = _jce(15, _INT64)
    like_source: int = _jce(16, _INT64)
    req_medal_wall_info: int = _jce(18, _BYTE)
    req_0x5eb_field_id: list = _jce(19, _INT64_LIST)
    req_nearby_god_info: int = _jce(20, _BYTE)
    req_extend_card: int = _jce(22, _BYTE)


@dataclass
class SummaryCardReqSearch(JceStruct):
    keyword: str = _jce(0, _STRING)
    country_code: str = _jce(1, _STRING)
    version: int = _jce(2, _INT32)
    req_services: list = _jce(3, _BYTES_LIST)


@dataclass
class DelFriendReq(JceStruct):
    uin: int = _jce(0, _INT64)
    del_uin: int = _jce(1, _INT64)
    del_type: int = _jce(2, _BYTE)
    version: int = _jce(3, _INT32)


@dataclass
class VipInfo(JceStruct):
    open: int = _jce(0, _BYTE)  # 1 when subscribed
    type: int = _jce(1, _INT32)  # 1 for yearly
    level: int = _jce(2, _INT32)