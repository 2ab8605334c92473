# dynmig

Building blocks for a terminal interface that compares the fields of two CRM entities and manages how they map onto each other. The package uses only the standard library.

Widgets draw onto an in-memory `Canvas` and take input as `Key` values, one-character strings and `MouseEvent`s. This makes them easy to drive and to inspect in tests.

## Modules

- `dynmig.terminal`: `Rect` (with `contains` and `inner`), `Color`, `Style`, `Span`, `Line` (with `plain`), `Key`, `MouseKind`, `MouseEvent`, `Constraint`, `Direction`, the layout helpers `split_area` and `centered_rect`, and `Canvas`. `Canvas` provides `draw_text`, `draw_line`, `clear`, `draw_box`, `set_cursor`, `row_text` and `style_at`.
- `dynmig.mouse`: `MouseHandler` holds `MouseZone`s. It resolves clicks to `SelectItem` actions and reports whether the hovered zone changed.
- `dynmig.relationship_types`: `RelationshipType`, and `parse_relationship_type`, which reads prefixes such as `1:N`, `N:1`, `nav`, `N:N` and `1:1`.
- `dynmig.field_renderer`: `FieldInfo`, `FieldMapping`, `MappingSource`, `MatchState` and `FieldDisplayInfo`. It also provides `truncate_value`, `render_field_string`, `render_field_line` and `render_field_line_with_context`. The last one has a compact examples mode that shows one side's example value.
- `dynmig.relationship`: `RelationshipField` and `RelationshipGroup`, plus these functions:
  - `extract_target_entity`
  - `extract_relationship_fields`
  - `filter_out_relationships`
  - `create_groups`
  - `field_node_group`
  - `render_relationship_field`

  Lookup fields named like `_xxx_value` with type `Edm.Guid` are treated as many-to-one relationships.
- `dynmig.hierarchy`: the `HierarchyNode` interface, `FieldRenderingInfo` and `TreeNode`.
- `dynmig.tree_state`: `HierarchyTree`. It handles expansion by node key, a flattened view, wrapping selection, name lookups for mirroring two trees, sorting by `SortMode`, and mouse scrolling and clicks.
- `dynmig.tree_renderer`: `render_node_line` and `render_node_line_with_field_data`, and the colour helpers `hierarchical_node_color`, `has_any_unmapped_descendant` and `hierarchical_color`. A node is red when it is unmapped, yellow when it is mapped but has an unmapped descendant, and green otherwise.
- `dynmig.footer`: `FooterComponent`, a boxed list of `FooterAction` key bindings.
- `dynmig.list_component`: `ListComponent`, a bordered selectable list driven by keys, clicks and scrolling. It returns `ListAction`s.
- `dynmig.modal`: `ModalComponent` frames any `ModalContent` in a centred box. It can close on Esc, on a click outside the box or on its `[×]` button. `TextModalContent` is a simple content type.
- `dynmig.confirmation`: `ConfirmationDialog`, a yes/no dialog that starts on "No".
- `dynmig.manual_mapping`: `ManualMappingModal` lists source → target field mappings and emits `ManualMappingDelete` requests.
- `dynmig.prefix_mapping`: `PrefixMappingModal` lists prefix mappings sorted by source. It has a two-step add form and emits `PrefixMappingAdd` and `PrefixMappingDelete` requests.
- `dynmig.fetch_progress`: `FetchProgress` and `FetchStatus`, which track the seven fetches behind a comparison.
- `dynmig.loading_modal`: `LoadingModal`, a spinner with progress for each fetch, or a list of errors once the fetches have failed.
- `dynmig.navigation`: the `Screen` base class, `ScreenResult`, and a `NavigationManager`. The manager draws the current screen above a footer and applies navigation; Back at the root exits.

## Examples

```python
from dynmig.field_renderer import (
    FieldDisplayInfo, FieldInfo, FieldMapping, MappingSource, MatchState,
    render_field_string,
)

field = FieldInfo(name="accountname", field_type="nvarchar", is_required=True)
mapping = FieldMapping("name", MappingSource.EXACT, MatchState.FULL_MATCH)
print(render_field_string(FieldDisplayInfo.with_mapping(field, mapping)))
# accountname * → name <nvarchar> [exact]
```

```python
from dynmig.field_renderer import FieldInfo
from dynmig.relationship import create_groups, extract_relationship_fields

fields = [
    FieldInfo("accountname", "string"),
    FieldInfo("primarycontactid", "N:1 → Contact"),
    FieldInfo("contacts", "1:N → Contact"),
]
for group in create_groups(extract_relationship_fields(fields)):
    print(group.display_name(), group.item_count())
# contacts 1
# primarycontactid 1
```

```python
from dynmig.list_component import ListComponent
from dynmig.terminal import Canvas, Key, Rect

items = ListComponent(["alpha", "beta"]).with_title("Items")
items.handle_key(Key.DOWN)
canvas = Canvas(20, 5)
items.render(canvas, Rect(0, 0, 20, 5))
print(canvas.row_text(2))
```

## What the package does not do

- It provides no command and no application loop. Nothing here reads a real terminal or writes escape codes to one. Drawing goes to `Canvas`, and input must be converted to `Key`, strings and `MouseEvent` by the caller.
- It does not connect to any CRM service and does not fetch metadata or records. `FetchProgress` only records the status that the caller sets.
- It provides no concrete screens, only the `Screen` base class. Example values for `render_node_line_with_field_data` come from any object with `examples_mode_enabled` and `get_example_value`.
- It does not store mappings. The modals return requests for the caller to persist.

## Running the tests

```
pip install -e ".[test]"
pytest
```