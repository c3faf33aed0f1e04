"""AVL and binary search trees, heaps and tries."""