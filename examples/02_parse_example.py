from __future__ import annotations

from axon_parser import bind_rows, parse, schema_to_model

axon_document = '''
@schema User
id:I
name:S
email:S
active:B
age:I?
@end

@data User[3]
1|Alice|alice@example.com|1|28
2|Bob|bob@example.com|0|_
3|Carol|carol@example.com|1|35
@end
'''.strip()

result = parse(axon_document)
print(f"Parsed {len(result.schemas)} schema(s) and {len(result.data_blocks)} data block(s)")

for block in result.data_blocks:
    User = schema_to_model(result.get_schema(block.schema_name))
    for user in bind_rows(block, User):
        print(user)
