from hypothesis import given
from hypothesis import strategies as st

from qqwire.jce.decoder import JceReader
from qqwire.jce.encoder import JceWriter
from qqwire.jce.social import (
    DelFriendReq,
    FriendInfo,
    FriendListRequest,
    ModifyGroupCardRequest,
    SummaryCardReq,
    SummaryCardReqSearch,
    TroopListRequest,
    TroopMemberInfo,
    TroopMemberListRequest,
    TroopNumber,
    UinInfo,
    VipInfo,
)


class _Raw:
    def __init__(self, payload):
        self._payload = payload

    def to_bytes(self):
        return self._payload


def _decode(cls, data):
    obj = cls()
    obj.read_from(JceReader(data))
    return obj


def test_del_friend_req_wire_bytes():
    req = DelFriendReq(uin=1, del_uin=2, del_type=2, version=1)
    assert req.to_bytes() == b"\x00\x01\x10\x02\x20\x02\x30\x01"


def test_default_del_friend_req_encodes_zero_heads():
    assert DelFriendReq().to_bytes() == b"\x0c\x1c\x2c\x3c"


def test_del_friend_req_round_trip():
    req = DelFriendReq(uin=123456789, del_uin=987654321, del_type=2, version=1)
    assert _decode(DelFriendReq, req.to_bytes()) == req


@given(
    st.integers(0, 255),
    st.integers(0, 2**31 - 1),
    st.integers(0, 2**31 - 1),
)
def test_vip_info_round_trip(open_, type_, level):
    info = VipInfo(open=open_, type=type_, level=level)
    assert _decode(VipInfo, info.to_bytes()) == info


def test_read_map_int_vip_info():
    vip = VipInfo(open=1, type=1, level=7)
    inner = b"\x08" + JceWriter().write_int32(1, 0).write_int64(7, 0).write_struct(vip, 1).to_bytes()
    data = JceWriter().write_struct(_Raw(inner), 3).to_bytes()
    result = JceReader(data).read_map_int_struct(VipInfo, 3)
    assert result == {7: vip}


def test_friend_info_reads_only_known_fields():
    info = FriendInfo(
        friend_uin=10001,
        group_id=3,
        face_id=300,
        remark="buddy",
        qq_type=9,
        status=10,
        member_level=5,
        show_name="shown",
        nick="nick",
        network=2,
        network_type=4,
        vip_font=77,
        card_id=b"card",
        master_uin="master",
        mutual_mark_data=b"mark",
    )
    decoded = _decode(FriendInfo, info.to_bytes())
    assert decoded.friend_uin == 10001
    assert decoded.group_id == 3
    assert decoded.face_id == 300
    assert decoded.remark == "buddy"
    assert decoded.status == 10
    assert decoded.member_level == 5
    assert decoded.nick == "nick"
    assert decoded.network == 2
    assert decoded.network_type == 4
    assert decoded.card_id == b"card"
    assert decoded.qq_type == 0
    assert decoded.show_name == ""
    assert decoded.vip_font == 0
    assert decoded.master_uin == ""
    assert decoded.mutual_mark_data == b""


def test_friend_info_list_round_trip_via_reader():
    friends = [FriendInfo(friend_uin=1, nick="a"), FriendInfo(friend_uin=2, nick="b")]
    data = JceWriter().write_struct_list(friends, 5).to_bytes()
    result = JceReader(data).read_struct_list(FriendInfo, 5)
    assert [f.friend_uin for f in result] == [1, 2]
    assert [f.nick for f in result] == ["a", "b"]


def test_troop_number_reads_only_known_fields():
    troop = TroopNumber(
        group_uin=2000,
        group_code=1000,
        flag=1,
        group_name="group",
        group_memo="memo",
        member_num=42,
        member_num_seq=8,
        group_owner_uin=5555,
        company_id=9,
        max_group_member_num=500,
        cmd_uin_flag_ex2=3,
    )
    decoded = _decode(TroopNumber, troop.to_bytes())
    assert decoded.group_uin == 2000
    assert decoded.group_code == 1000
    assert decoded.group_name == "group"
    assert decoded.group_memo == "memo"
    assert decoded.member_num == 42
    assert decoded.group_owner_uin == 5555
    assert decoded.max_group_member_num == 500
    assert decoded.flag == 0
    assert decoded.member_num_seq == 0
    assert decoded.company_id == 0
    assert decoded.cmd_uin_flag_ex2 == 0


def test_troop_member_info_reads_only_known_fields():
    member = TroopMemberInfo(
        member_uin=3000,
        face_id=12,
        age=20,
        gender=1,
        nick="nick",
        show_name="show",
        name="name",
        memo="memo",
        auto_remark="auto",
        member_level=3,
        join_time=1600000000,
        last_speak_time=1600000100,
        flag=1,
        special_title="title",
        special_title_expire_time=4000000000,
        job="job",
        shut_up_timestamp=1700000000,
        group_honor=b"honor",
    )
    decoded = _decode(TroopMemberInfo, member.to_bytes())
    assert decoded.member_uin == 3000
    assert decoded.face_id == 12
    assert decoded.gender == 1
    assert decoded.nick == "nick"
    assert decoded.show_name == "show"
    assert decoded.name == "name"
    assert decoded.auto_remark == "auto"
    assert decoded.member_level == 3
    assert decoded.join_time == 1600000000
    assert decoded.last_speak_time == 1600000100
    assert decoded.flag == 1
    assert decoded.special_title == "title"
    assert decoded.special_title_expire_time == 4000000000
    assert decoded.shut_up_timestamp == 1700000000
    assert decoded.age == 0
    assert decoded.memo == ""
    assert decoded.job == ""
    assert decoded.group_honor == b""


def test_friend_list_request_scalar_fields_round_trip():
    req = FriendListRequest(
        reqtype=3,
        if_reflush=1,
        uin=123456,
        start_index=150,
        friend_count=150,
        if_get_group_info=1,
        group_count=28,
        if_show_term_type=1,
        version=27,
        d50=b"\x08\xea\x07",
        d6b=b"",
        sns_type_list=[13580, 13581, 13582],
    )
    decoded = _decode(FriendListRequest, req.to_bytes())
    assert decoded.reqtype == 3
    assert decoded.uin == 123456
    assert decoded.start_index == 150
    assert decoded.friend_count == 150
    assert decoded.group_count == 28
    assert decoded.version == 27
    assert decoded.d50 == b"\x08\xea\x07"
    assert decoded.d6b == b""


def test_troop_list_request_round_trip_of_readable_fields():
    req = TroopListRequest(
        uin=42, get_msf_msg_flag=1, cookies=b"cookie", group_info=[], group_flag_ext=1,
        version=7, company_id=0, version_num=1, get_long_group_name=1,
    )
    decoded = _decode(TroopListRequest, req.to_bytes())
    assert decoded.uin == 42
    assert decoded.cookies == b"cookie"
    assert decoded.version == 7
    assert decoded.get_long_group_name == 1


def test_troop_member_list_request_round_trip():
    req = TroopMemberListRequest(uin=1, group_code=2, next_uin=3, group_uin=4, version=2)
    assert _decode(TroopMemberListRequest, req.to_bytes()) == req


def test_modify_group_card_request_nested_round_trip():
    req = ModifyGroupCardRequest(
        group_code=111,
        uin_info=[UinInfo(uin=222, flag=31, name="new card"), UinInfo(uin=333, name="other")],
    )
    decoded = _decode(ModifyGroupCardRequest, req.to_bytes())
    assert decoded == req
    assert decoded.uin_info[0].name == "new card"


def test_summary_card_req_services_round_trip():
    req = SummaryCardReq(
        uin=10001,
        come_from=31,
        get_control=69181,
        add_friend_source=3001,
        secure_sig=b"\x00",
        req_services=[b"\x28abc\x29", b""],
        req_0x5eb_field_id=[27225, 27224],
        req_nearby_god_info=1,
        req_extend_card=1,
    )
    decoded = _decode(SummaryCardReq, req.to_bytes())
    assert decoded.uin == 10001
    assert decoded.get_control == 69181
    assert decoded.add_friend_source == 3001
    assert decoded.secure_sig == b"\x00"
    assert decoded.req_services == [b"\x28abc\x29", b""]
    assert decoded.req_extend_card == 1


def test_summary_card_req_search_round_trip():
    req = SummaryCardReqSearch(keyword="find me", country_code="+86", version=3, req_services=[b"x"])
    assert _decode(SummaryCardReqSearch, req.to_bytes()) == req


def test_vip_info_default():
    assert VipInfo().to_bytes() == b"\x0c\x1c\x2c"