from dynmig.field_renderer import FieldInfo, MappingSource, MatchState
from dynmig.relationship import (
    RelationshipField,
    RelationshipGroup,
    create_groups,
    extract_relationship_fields,
    extract_target_entity,
    field_node_group,
    filter_out_relationships,
    render_relationship_field,
)
from dynmig.relationship_types import RelationshipType
from dynmig.terminal import Color


def make_field(name, field_type, required=False):
    return FieldInfo(name=name, field_type=field_type, is_required=required)


def test_relationship_field_creation():
    rel = RelationshipField.from_field_info(make_field("primarycontactid", "N:1 → Contact"))
    assert rel is not None
    assert rel.target_entity == "Contact"
    assert rel.relationship_type is RelationshipType.MANY_TO_ONE


def test_plain_field_is_not_relationship():
    assert RelationshipField.from_field_info(make_field("revenue", "money")) is None


def test_relationship_extraction():
    fields = [
        make_field("accountname", "string"),
        make_field("primarycontactid", "N:1 → Contact"),
        make_field("revenue", "money"),
        make_field("contacts", "1:N → Contact"),
    ]
    assert len(extract_relationship_fields(fields)) == 2
    regular = filter_out_relationships(fields)
    assert len(regular) == 2
    assert regular[0].name == "accountname"
    assert regular[1].name == "revenue"


def test_extract_target_entity():
    assert extract_target_entity("N:1 → Contact") == "Contact"
    assert (
        extract_target_entity("1:N → new_bpf_fd08e4482f51463fbcf966f706a5a983")
        == "new_bpf_fd08e4482f51463fbcf966f706a5a983"
    )
    assert extract_target_entity("no arrow here") == "Unknown"
    assert extract_target_entity("N:1 → ") == ""
    assert extract_target_entity("N:1 →   Account   ") == "Account"


def test_relationship_grouping():
    fields = [
        RelationshipField.from_field_info(make_field("primarycontactid", "N:1 → Contact")),
        RelationshipField.from_field_info(make_field("contacts", "1:N → Contact")),
        RelationshipField.from_field_info(make_field("ownerid", "N:1 → User")),
    ]
    groups = create_groups(fields)
    assert len(groups) == 2
    one_to_many = next(g for g in groups if g.relationship_type is RelationshipType.ONE_TO_MANY)
    assert len(one_to_many.fields) == 1
    many_to_one = next(g for g in groups if g.relationship_type is RelationshipType.MANY_TO_ONE)
    assert len(many_to_one.fields) == 2
    assert [g.relationship_type for g in groups] == [
        RelationshipType.ONE_TO_MANY,
        RelationshipType.MANY_TO_ONE,
    ]


def test_lookup_field_with_id_suffix():
    rel = RelationshipField.from_field_info(make_field("_cgk_presidentid_value", "Edm.Guid"))
    assert rel.relationship_type is RelationshipType.MANY_TO_ONE
    assert rel.target_entity == "President"


def test_lookup_field_system_user():
    rel = RelationshipField.from_field_info(make_field("_modifiedby_value", "Edm.Guid"))
    assert rel.target_entity == "SystemUser"


def test_lookup_field_owning_team():
    rel = RelationshipField.from_field_info(make_field("_owningteam_value", "Edm.Guid"))
    assert rel.target_entity == "Team"


def test_value_suffix_needs_guid_type():
    assert RelationshipField.from_field_info(make_field("_foo_value", "string")) is None


def test_field_node_interface():
    rel = RelationshipField.from_field_info(make_field("primarycontactid", "N:1 → Contact"))
    assert rel.display_name() == "primarycontactid → Contact <Many:1>"
    assert rel.clean_name() == "primarycontactid"
    assert rel.node_key() == "field_primarycontactid"
    assert rel.item_count() == 0
    assert not rel.is_expandable()
    assert rel.is_field_node()
    assert rel.mapping_target() is None


def test_field_info_unmapped_and_mapped():
    rel = RelationshipField.from_field_info(make_field("primarycontactid", "N:1 → Contact", True))
    info = rel.field_info()
    assert info.field_type == "Many:1 → Contact"
    assert info.is_required
    assert info.mapping_source is None
    assert info.match_state is MatchState.NO_MATCH

    mapped = rel.with_mapping("contactid")
    assert rel.mapping_target() is None
    assert mapped.mapping_target() == "contactid"
    mapped_info = mapped.field_info()
    assert mapped_info.mapping_target == "contactid"
    assert mapped_info.mapping_source is MappingSource.MANUAL
    assert mapped_info.match_state is MatchState.FULL_MATCH


def test_multi_field_group_node():
    group = RelationshipGroup(RelationshipType.MANY_TO_ONE)
    assert group.is_empty()
    group.add_field(RelationshipField.from_field_info(make_field("a", "N:1 → X")))
    group.add_field(RelationshipField.from_field_info(make_field("b", "N:1 → Y")))
    assert not group.is_empty()
    assert group.display_name() == "Reference (Many:1)"
    assert group.clean_name() == "Reference (Many:1)"
    assert group.item_count() == 2
    assert group.is_expandable()
    assert group.mapping_target() is None
    assert group.node_key() == "group_Many:1"


def test_single_field_group_node():
    rel = RelationshipField.from_field_info(make_field("contacts", "1:N → Contact")).with_mapping(
        "people"
    )
    group = field_node_group(rel)
    assert group.relationship_type is RelationshipType.ONE_TO_MANY
    assert group.display_name() == "contacts"
    assert group.clean_name() == "contacts"
    assert not group.is_expandable()
    assert group.mapping_target() == "people"
    assert group.node_key() == "field_contacts"


def test_render_relationship_field():
    rel = RelationshipField.from_field_info(make_field("primarycontactid", "N:1 → Contact", True))
    line = render_relationship_field(rel)
    assert line.plain() == "primarycontactid * → Contact <Many:1>"
    assert line.spans[0].style.fg is Color.WHITE
    assert line.spans[1].style.fg is Color.RED


def test_render_relationship_field_not_required():
    rel = RelationshipField.from_field_info(make_field("contacts", "1:N → Contact"))
    assert render_relationship_field(rel).plain() == "contacts → Contact <1:Many>"