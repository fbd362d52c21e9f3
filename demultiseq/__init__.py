"""DeMultiSeq: UMI counting of MULTI-seq cell barcode and sample tag pairs."""
