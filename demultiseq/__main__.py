#!/usr/bin/env python3
"""
Demultiplexes MULTI-seq paired-end reads into UMI counts per cell and tag.
"""
import sys
import time

from demultiseq import (
    preprocessing,
    argsparser,
    processing,
    chemistry,
    io,
)


def main():
    """Main"""
    start_time = time.time()
    parser = argsparser.get_args()
    if not sys.argv[1:]:
        parser.print_help(file=sys.stderr)
        sys.exit(2)

    # Parse arguments.
    args = parser.parse_args()

    chemistry_def = chemistry.create_chemistry_definition(args)

    # Load whitelists.
    cell_whitelist = preprocessing.parse_whitelist_file(
        filename=args.cell_barcodes,
        barcode_length=chemistry_def.cell_barcode_length,
        file_type="cell barcodes",
    )
    tag_whitelist = preprocessing.parse_whitelist_file(
        filename=args.multiseq_barcodes,
        barcode_length=chemistry_def.tag_length,
        file_type="multiseq barcodes",
    )
    preprocessing.check_tags(tag_whitelist, args.tolerance)

    # Identify input file(s)
    read1_paths, read2_paths = io.get_read_paths(args.read1_path, args.read2_path)
    if len(read1_paths) != 1:
        print(
            f"Detected {len(read1_paths)} pairs of files to run on.", file=sys.stderr
        )

    engine = processing.DemultiplexEngine(
        cell_whitelist=cell_whitelist,
        tag_whitelist=tag_whitelist,
        tolerance=args.tolerance,
        chemistry=chemistry_def,
    )
    stats = engine.run(
        io.read_pairs(read1_paths, read2_paths), first_n=args.first_n
    )
    print(
        f"Read pairs processed : {stats.total_pairs}, recorded : {stats.recorded}",
        file=sys.stderr,
    )
    if stats.r1_too_short or stats.r2_too_short:
        print(
            f"[WARNING] {stats.r1_too_short} Read1 and {stats.r2_too_short} Read2 "
            f"sequences were too short and were skipped.",
            file=sys.stderr,
        )

    io.write_counts(engine.store.to_frame(), args.outfile)
    if args.unmapped_file is not None:
        io.write_unmapped(
            unmapped_tags=engine.unmapped_tags,
            top_unknowns=args.unknowns_top,
            outfile=args.unmapped_file,
        )
    if args.report_file is not None:
        io.create_report(
            stats=stats,
            version=argsparser.get_package_version(),
            start_time=start_time,
            args=args,
            outfile=args.report_file,
        )


if __name__ == "__main__":
    main()
