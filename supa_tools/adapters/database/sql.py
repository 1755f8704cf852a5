"""Catalog queries behind the list_tables and list_extensions tools."""

from textwrap import dedent


def _quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def list_tables_sql(schemas: list[str]) -> str:
    """Tables, columns and primary keys of the given schemas."""
    schema_list = ", ".join(_quote_literal(s) for s in schemas)
    return dedent(
        f"""
        SELECT
          c.oid::int8 AS id,
          nc.nspname AS schema,
          c.relname AS name,
          c.relrowsecurity AS rls_enabled,
          c.relforcerowsecurity AS rls_forced,
          CASE c.relreplident
            WHEN 'd' THEN 'DEFAULT'
            WHEN 'n' THEN 'NOTHING'
            WHEN 'f' THEN 'FULL'
            WHEN 'i' THEN 'INDEX'
          END AS replica_identity,
          pg_total_relation_size(c.oid)::int8 AS bytes,
          pg_size_pretty(pg_total_relation_size(c.oid)) AS size,
          c.reltuples::int8 AS live_rows_estimate,
          0::int8 AS dead_rows_estimate,
          obj_description(c.oid) AS comment,
          COALESCE(
            (SELECT json_agg(json_build_object(
              'schema', nc.nspname,
              'table_name', c.relname,
              'name', a.attname,
              'table_id', c.oid::int8
            ))
            FROM pg_index i
            JOIN pg_attribute a ON a.attrelid = i.indrelid AND a.attnum = ANY(i.indkey)
            WHERE i.indrelid = c.oid AND i.indisprimary),
            '[]'::json
          ) AS primary_keys,
          '[]'::json AS relationships,
          COALESCE(
            (SELECT json_agg(json_build_object(
              'id', nc.nspname || '.' || c.relname || '.' || a.attnum,
              'table_id', c.oid::int8,
              'schema', nc.nspname,
              'table', c.relname,
              'name', a.attname,
              'ordinal_position', a.attnum,
              'default_value', pg_get_expr(ad.adbin, ad.adrelid),
              'data_type', format_type(a.atttypid, a.atttypmod),
              'format', t.typname,
              'is_identity', a.attidentity != '',
              'identity_generation', NULLIF(a.attidentity, ''),
              'is_generated', a.attgenerated != '',
              'is_nullable', NOT a.attnotnull,
              'is_updatable', true,
              'is_unique', false,
              'enums', COALESCE((SELECT array_agg(e.enumlabel) FROM pg_enum e WHERE e.enumtypid = a.atttypid), ARRAY[]::text[]),
              'check', NULL,
              'comment', col_description(c.oid, a.attnum)
            ) ORDER BY a.attnum)
            FROM pg_attribute a
            LEFT JOIN pg_attrdef ad ON ad.adrelid = a.attrelid AND ad.adnum = a.attnum
            LEFT JOIN pg_type t ON t.oid = a.atttypid
            WHERE a.attrelid = c.oid AND a.attnum > 0 AND NOT a.attisdropped),
            '[]'::json
          ) AS columns
        FROM pg_class c
        JOIN pg_namespace nc ON nc.oid = c.relnamespace
        WHERE c.relkind IN ('r', 'p')
          AND nc.nspname IN ({schema_list})
        ORDER BY nc.nspname, c.relname
        """
    ).strip()


def list_extensions_sql() -> str:
    """Installed extensions with their available default version."""
    return dedent(
        """
        SELECT
          e.extname AS name,
          n.nspname AS schema,
          e.extversion AS installed_version,
          a.default_version,
          c.description AS comment
        FROM pg_extension e
        LEFT JOIN pg_namespace n ON n.oid = e.extnamespace
        LEFT JOIN pg_available_extensions a ON a.name = e.extname
        LEFT JOIN pg_description c ON c.objoid = e.oid
        ORDER BY e.extname
        """
    ).strip()
