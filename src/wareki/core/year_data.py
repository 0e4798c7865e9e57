# src/wareki/core/year_data.py
from __future__ import annotations

"""
Lunisolar year table, 593..1872.

YEAR_ROWS[y - 593] = (era, north_era, months, leap, mask)
  - era:       元号コード（南朝）
  - north_era: 元号コード（北朝）。南北朝期以外は None
  - months:    月の数 (12 or 13)
  - leap:      閏月の位置 (1..12)。閏年でなければ None
  - mask:      月の大小。bit i = 1 なら i 番目の月が大の月 (30日)

YEAR_START_MS[y - 593] = 旧暦正月朔日 0:00 JST の epoch milliseconds
"""

from typing import Optional, Tuple

FIRST_YEAR = 593
LAST_YEAR = 1872

YEAR_ROWS: Tuple[Tuple[int, Optional[int], int, Optional[int], int], ...] = (
    (0, None, 12, None, 2730),  # 593
    (0, None, 13, 9, 5461),  # 594
    (0, None, 12, None, 1370),  # 595
    (0, None, 12, None, 2901),  # 596
    (0, None, 13, 5, 6826),  # 597
    (0, None, 12, None, 2730),  # 598
    (0, None, 12, None, 1370),  # 599
    (0, None, 13, 1, 2901),  # 600
    (0, None, 12, None, 3413),  # 601
    (0, None, 13, 10, 2730),  # 602
    (0, None, 12, None, 2733),  # 603
    (0, None, 12, None, 1450),  # 604
    (0, None, 13, 7, 3413),  # 605
    (0, None, 12, None, 1365),  # 606
    (0, None, 12, None, 2733),  # 607
    (0, None, 13, 3, 5546),  # 608
    (0, None, 12, None, 1706),  # 609
    (0, None, 13, 11, 5461),  # 610
    (0, None, 12, None, 1366),  # 611
    (0, None, 12, None, 2773),  # 612
    (0, None, 13, 8, 5802),  # 613
    (0, None, 12, None, 2730),  # 614
    (0, None, 12, None, 1366),  # 615
    (0, None, 13, 5, 2773),  # 616
    (0, None, 12, None, 2901),  # 617
    (0, None, 12, None, 2730),  # 618
    (0, None, 13, 2, 5462),  # 619
    (0, None, 12, None, 1386),  # 620
    (0, None, 13, 10, 2901),  # 621
    (0, None, 12, None, 1365),  # 622
    (0, None, 12, None, 2731),  # 623
    (0, None, 13, 7, 5482),  # 624
    (0, None, 12, None, 1450),  # 625
    (0, None, 12, None, 1365),  # 626
    (0, None, 13, 4, 2731),  # 627
    (0, None, 12, None, 2741),  # 628
    (1, None, 13, 12, 5546),  # 629
    (1, None, 12, None, 2730),  # 630
    (1, None, 12, None, 1365),  # 631
    (1, None, 13, 8, 2741),  # 632
    (1, None, 12, None, 2773),  # 633
    (1, None, 12, None, 2730),  # 634
    (1, None, 13, 5, 5461),  # 635
    (1, None, 12, None, 1370),  # 636
    (1, None, 12, None, 2773),  # 637
    (1, None, 13, 2, 6826),  # 638
    (1, None, 12, None, 2730),  # 639
    (1, None, 13, 11, 5466),  # 640
    (1, None, 12, None, 1450),  # 641
    (2, None, 12, None, 3413),  # 642
    (2, None, 13, 7, 2730),  # 643
    (2, None, 12, None, 2733),  # 644
    (3, None, 12, None, 1450),  # 645
    (3, None, 13, 3, 3413),  # 646
    (3, None, 12, None, 1365),  # 647
    (3, None, 13, 12, 2733),  # 648
    (3, None, 12, None, 2773),  # 649
    (4, None, 12, None, 1706),  # 650
    (4, None, 13, 9, 5461),  # 651
    (4, None, 12, None, 1366),  # 652
    (4, None, 12, None, 2773),  # 653
    (4, None, 13, 5, 5802),  # 654
    (5, None, 12, None, 2730),  # 655
    (5, None, 12, None, 1366),  # 656
    (5, None, 13, 1, 2773),  # 657
    (5, None, 12, None, 2901),  # 658
    (5, None, 13, 10, 2730),  # 659
    (5, None, 12, None, 2731),  # 660
    (5, None, 12, None, 1386),  # 661
    (6, None, 13, 7, 2901),  # 662
    (6, None, 12, None, 1365),  # 663
    (6, None, 12, None, 2731),  # 664
    (6, None, 13, 3, 5482),  # 665
    (6, None, 12, None, 1450),  # 666
    (6, None, 13, 11, 5461),  # 667
    (6, None, 12, None, 1365),  # 668
    (6, None, 12, None, 2741),  # 669
    (6, None, 13, 9, 5546),  # 670
    (6, None, 12, None, 2730),  # 671
    (7, None, 12, None, 1365),  # 672
    (7, None, 13, 6, 2741),  # 673
    (7, None, 12, None, 2773),  # 674
    (7, None, 12, None, 2730),  # 675
    (7, None, 13, 2, 5461),  # 676
    (7, None, 12, None, 1370),  # 677
    (7, None, 13, 10, 2773),  # 678
    (7, None, 12, None, 3413),  # 679
    (7, None, 12, None, 2730),  # 680
    (7, None, 13, 7, 5466),  # 681
    (7, None, 12, None, 1386),  # 682
    (7, None, 12, None, 3413),  # 683
    (7, None, 13, 4, 2730),  # 684
    (7, None, 12, None, 2733),  # 685
    (8, None, 13, 12, 5482),  # 686
    (9, None, 12, None, 1706),  # 687
    (9, None, 12, None, 1365),  # 688
    (9, None, 13, 8, 2733),  # 689
    (9, None, 12, None, 2741),  # 690
    (9, None, 12, None, 1706),  # 691
    (9, None, 13, 5, 6485),  # 692
    (9, None, 12, None, 1366),  # 693
    (9, None, 12, None, 2741),  # 694
    (9, None, 13, 2, 5802),  # 695
    (9, None, 12, None, 1706),  # 696
    (10, None, 13, 12, 3482),  # 697
    (10, None, 12, None, 3497),  # 698
    (10, None, 12, None, 3474),  # 699
    (10, None, 13, 7, 7461),  # 700
    (11, None, 12, None, 3366),  # 701
    (11, None, 12, None, 2390),  # 702
    (11, None, 13, 4, 4789),  # 703
    (12, None, 12, None, 2774),  # 704
    (12, None, 12, None, 1748),  # 705
    (12, None, 13, 1, 3497),  # 706
    (12, None, 12, None, 3785),  # 707
    (13, None, 13, 8, 3730),  # 708
    (13, None, 12, None, 1683),  # 709
    (13, None, 12, None, 1323),  # 710
    (13, None, 13, 6, 2391),  # 711
    (13, None, 12, None, 2395),  # 712
    (13, None, 12, None, 2906),  # 713
    (13, None, 13, 2, 5844),  # 714
    (14, None, 12, None, 1876),  # 715
    (14, None, 13, 11, 5961),  # 716
    (15, None, 12, None, 2889),  # 717
    (15, None, 12, None, 2707),  # 718
    (15, None, 13, 7, 5419),  # 719
    (15, None, 12, None, 1325),  # 720
    (15, None, 12, None, 2477),  # 721
    (15, None, 13, 4, 2922),  # 722
    (15, None, 12, None, 3498),  # 723
    (16, None, 12, None, 2980),  # 724
    (16, None, 13, 1, 6985),  # 725
    (16, None, 12, None, 3273),  # 726
    (16, None, 13, 9, 6805),  # 727
    (16, None, 12, None, 2710),  # 728
    (17, None, 12, None, 1333),  # 729
    (17, None, 13, 6, 2733),  # 730
    (17, None, 12, None, 2773),  # 731
    (17, None, 12, None, 3506),  # 732
    (17, None, 13, 3, 3490),  # 733
    (17, None, 12, None, 3749),  # 734
    (17, None, 13, 11, 3402),  # 735
    (17, None, 12, None, 1355),  # 736
    (17, None, 12, None, 2711),  # 737
    (17, None, 13, 7, 5462),  # 738
    (17, None, 12, None, 1370),  # 739
    (17, None, 12, None, 2773),  # 740
    (17, None, 13, 3, 5842),  # 741
    (17, None, 12, None, 1874),  # 742
    (17, None, 12, None, 3749),  # 743
    (17, None, 13, 1, 5706),  # 744
    (17, None, 12, None, 1611),  # 745
    (17, None, 13, 9, 2715),  # 746
    (17, None, 12, None, 2733),  # 747
    (17, None, 12, None, 1386),  # 748
    (19, None, 13, 5, 2905),  # 749
    (19, None, 12, None, 2985),  # 750
    (19, None, 12, None, 2898),  # 751
    (19, None, 13, 3, 6949),  # 752
    (19, None, 12, None, 2853),  # 753
    (19, None, 13, 10, 6731),  # 754
    (19, None, 12, None, 2645),  # 755
    (19, None, 12, None, 2733),  # 756
    (20, None, 13, 8, 5482),  # 757
    (20, None, 12, None, 1460),  # 758
    (20, None, 12, None, 3497),  # 759
    (20, None, 13, 4, 7570),  # 760
    (20, None, 12, None, 1362),  # 761
    (20, None, 13, 12, 3367),  # 762
    (20, None, 12, None, 3367),  # 763
    (20, None, 12, None, 2646),  # 764
    (21, None, 13, 10, 4790),  # 765
    (21, None, 12, None, 2774),  # 766
    (22, None, 12, None, 1748),  # 767
    (22, None, 13, 6, 3753),  # 768
    (22, None, 12, None, 3913),  # 769
    (23, None, 12, None, 3730),  # 770
    (23, None, 13, 3, 3366),  # 771
    (23, None, 12, None, 3371),  # 772
    (23, None, 13, 11, 6490),  # 773
    (23, None, 12, None, 2410),  # 774
    (23, None, 12, None, 2778),  # 775
    (23, None, 13, 8, 5844),  # 776
    (23, None, 12, None, 2962),  # 777
    (23, None, 12, None, 1805),  # 778
    (23, None, 13, 5, 7819),  # 779
    (23, None, 12, None, 3730),  # 780
    (24, None, 12, None, 1322),  # 781
    (25, None, 13, 1, 2651),  # 782
    (25, None, 12, None, 2411),  # 783
    (25, None, 13, 9, 3434),  # 784
    (25, None, 12, None, 2986),  # 785
    (25, None, 12, None, 3476),  # 786
    (25, None, 13, 5, 7493),  # 787
    (25, None, 12, None, 3402),  # 788
    (25, None, 12, None, 2709),  # 789
    (25, None, 13, 3, 5291),  # 790
    (25, None, 12, None, 1326),  # 791
    (25, None, 13, 11, 1459),  # 792
    (25, None, 12, None, 2773),  # 793
    (25, None, 12, None, 3794),  # 794
    (25, None, 13, 7, 7588),  # 795
    (25, None, 12, None, 3748),  # 796
    (25, None, 12, None, 3402),  # 797
    (25, None, 13, 5, 7317),  # 798
    (25, None, 12, None, 2710),  # 799
    (25, None, 12, None, 1366),  # 800
    (25, None, 13, 1, 2773),  # 801
    (25, None, 12, None, 2777),  # 802
    (25, None, 13, 10, 5842),  # 803
    (25, None, 12, None, 1874),  # 804
    (25, None, 12, None, 3877),  # 805
    (26, None, 13, 6, 7754),  # 806
    (26, None, 12, None, 1354),  # 807
    (26, None, 12, None, 3227),  # 808
    (26, None, 13, 2, 5466),  # 809
    (27, None, 12, None, 874),  # 810
    (27, None, 13, 12, 2921),  # 811
    (27, None, 12, None, 2985),  # 812
    (27, None, 12, None, 2898),  # 813
    (27, None, 13, 7, 6949),  # 814
    (27, None, 12, None, 3365),  # 815
    (27, None, 12, None, 1613),  # 816
    (27, None, 13, 4, 4781),  # 817
    (27, None, 12, None, 2733),  # 818
    (27, None, 12, None, 1450),  # 819
    (27, None, 13, 1, 2917),  # 820
    (27, None, 12, None, 3497),  # 821
    (27, None, 13, 9, 7569),  # 822
    (27, None, 12, None, 3474),  # 823
    (28, None, 12, None, 3366),  # 824
    (28, None, 13, 7, 2645),  # 825
    (28, None, 12, None, 2647),  # 826
    (28, None, 12, None, 2774),  # 827
    (28, None, 13, 3, 5553),  # 828
    (28, None, 12, None, 1748),  # 829
    (28, None, 13, 12, 3737),  # 830
    (28, None, 12, None, 3785),  # 831
    (28, None, 12, None, 3729),  # 832
    (28, None, 13, 7, 3366),  # 833
    (29, None, 12, None, 3371),  # 834
    (29, None, 12, None, 2650),  # 835
    (29, None, 13, 5, 4826),  # 836
    (29, None, 12, None, 2922),  # 837
    (29, None, 12, None, 1748),  # 838
    (29, None, 13, 1, 3785),  # 839
    (29, None, 12, None, 1865),  # 840
    (29, None, 13, 9, 5779),  # 841
    (29, None, 12, None, 1683),  # 842
    (29, None, 12, None, 1323),  # 843
    (29, None, 13, 7, 2395),  # 844
    (29, None, 12, None, 1453),  # 845
    (29, None, 12, None, 2922),  # 846
    (29, None, 13, 3, 5972),  # 847
    (30, None, 12, None, 2980),  # 848
    (30, None, 13, 12, 6985),  # 849
    (30, None, 12, None, 3401),  # 850
    (31, None, 12, None, 2709),  # 851
    (31, None, 13, 8, 5421),  # 852
    (31, None, 12, None, 1334),  # 853
    (32, None, 12, None, 3765),  # 854
    (32, None, 13, 4, 3496),  # 855
    (32, None, 12, None, 3538),  # 856
    (33, None, 12, None, 3492),  # 857
    (33, None, 13, 2, 7497),  # 858
    (34, None, 12, None, 3402),  # 859
    (34, None, 13, 10, 5781),  # 860
    (34, None, 12, None, 2710),  # 861
    (34, None, 12, None, 1205),  # 862
    (34, None, 13, 6, 1709),  # 863
    (34, None, 12, None, 1749),  # 864
    (34, None, 12, None, 3497),  # 865
    (34, None, 13, 3, 7586),  # 866
    (34, None, 12, None, 3746),  # 867
    (34, None, 13, 12, 3398),  # 868
    (34, None, 12, None, 3371),  # 869
    (34, None, 12, None, 2646),  # 870
    (34, None, 13, 8, 5462),  # 871
    (34, None, 12, None, 3418),  # 872
    (34, None, 12, None, 3796),  # 873
    (34, None, 13, 4, 5832),  # 874
    (34, None, 12, None, 1873),  # 875
    (34, None, 12, None, 1699),  # 876
    (35, None, 13, 2, 5451),  # 877
    (35, None, 12, None, 1355),  # 878
    (35, None, 13, 10, 2715),  # 879
    (35, None, 12, None, 2733),  # 880
    (35, None, 12, None, 1386),  # 881
    (35, None, 13, 7, 2901),  # 882
    (35, None, 12, None, 2981),  # 883
    (35, None, 12, None, 2898),  # 884
    (36, None, 13, 3, 6805),  # 885
    (36, None, 12, None, 2837),  # 886
    (36, None, 13, 11, 5451),  # 887
    (36, None, 12, None, 1365),  # 888
    (37, None, 12, None, 2741),  # 889
    (37, None, 13, 9, 1450),  # 890
    (37, None, 12, None, 3539),  # 891
    (37, None, 12, None, 3492),  # 892
    (37, None, 13, 5, 7498),  # 893
    (37, None, 12, None, 3474),  # 894
    (37, None, 12, None, 3349),  # 895
    (37, None, 13, 1, 6477),  # 896
    (37, None, 12, None, 1366),  # 897
    (38, None, 13, 10, 2741),  # 898
    (38, None, 12, None, 2773),  # 899
    (38, None, 12, None, 1748),  # 900
    (39, None, 13, 6, 3749),  # 901
    (39, None, 12, None, 3781),  # 902
    (39, None, 12, None, 3722),  # 903
    (39, None, 13, 3, 3350),  # 904
    (39, None, 12, None, 3243),  # 905
    (39, None, 13, 12, 2394),  # 906
    (39, None, 12, None, 1387),  # 907
    (39, None, 12, None, 2922),  # 908
    (39, None, 13, 8, 5972),  # 909
    (39, None, 12, None, 1874),  # 910
    (39, None, 12, None, 1861),  # 911
    (39, None, 13, 5, 5771),  # 912
    (39, None, 12, None, 2707),  # 913
    (39, None, 12, None, 1195),  # 914
    (39, None, 13, 2, 2395),  # 915
    (39, None, 12, None, 1453),  # 916
    (39, None, 13, 10, 2922),  # 917
    (39, None, 12, None, 3498),  # 918
    (39, None, 12, None, 2978),  # 919
    (39, None, 13, 6, 6981),  # 920
    (39, None, 12, None, 3397),  # 921
    (39, None, 12, None, 2709),  # 922
    (40, None, 13, 4, 5421),  # 923
    (40, None, 12, None, 1334),  # 924
    (40, None, 13, 12, 1717),  # 925
    (40, None, 12, None, 1749),  # 926
    (40, None, 12, None, 3530),  # 927
    (40, None, 13, 8, 7586),  # 928
    (40, None, 12, None, 3746),  # 929
    (40, None, 12, None, 3402),  # 930
    (41, None, 13, 5, 2710),  # 931
    (41, None, 12, None, 2711),  # 932
    (41, None, 12, None, 1366),  # 933
    (41, None, 13, 1, 2741),  # 934
    (41, None, 12, None, 2773),  # 935
    (41, None, 13, 11, 1746),  # 936
    (41, None, 12, None, 851),  # 937
    (42, None, 12, None, 1703),  # 938
    (42, None, 13, 7, 5451),  # 939
    (42, None, 12, None, 1355),  # 940
    (42, None, 12, None, 2715),  # 941
    (42, None, 13, 3, 6490),  # 942
    (42, None, 12, None, 1386),  # 943
    (42, None, 13, 12, 2917),  # 944
    (42, None, 12, None, 2985),  # 945
    (42, None, 12, None, 2898),  # 946
    (43, None, 13, 7, 6949),  # 947
    (43, None, 12, None, 2853),  # 948
    (43, None, 12, None, 1613),  # 949
    (43, None, 13, 5, 2733),  # 950
    (43, None, 12, None, 2733),  # 951
    (43, None, 12, None, 1450),  # 952
    (43, None, 13, 1, 2985),  # 953
    (43, None, 12, None, 3497),  # 954
    (43, None, 13, 9, 7570),  # 955
    (43, None, 12, None, 3474),  # 956
    (44, None, 12, None, 3365),  # 957
    (44, None, 13, 7, 6741),  # 958
    (44, None, 12, None, 2390),  # 959
    (44, None, 12, None, 2741),  # 960
    (45, None, 13, 3, 5556),  # 961
    (45, None, 12, None, 1748),  # 962
    (45, None, 13, 12, 3753),  # 963
    (46, None, 12, None, 1865),  # 964
    (46, None, 12, None, 3731),  # 965
    (46, None, 13, 8, 3366),  # 966
    (46, None, 12, None, 3371),  # 967
    (47, None, 12, None, 2394),  # 968
    (47, None, 13, 5, 2774),  # 969
    (48, None, 12, None, 2922),  # 970
    (48, None, 12, None, 1876),  # 971
    (48, None, 13, 2, 3785),  # 972
    (49, None, 12, None, 1865),  # 973
    (49, None, 13, 10, 5779),  # 974
    (49, None, 12, None, 2837),  # 975
    (50, None, 12, None, 1323),  # 976
    (50, None, 13, 7, 2651),  # 977
    (51, None, 12, None, 1453),  # 978
    (51, None, 12, None, 2922),  # 979
    (51, None, 13, 3, 6996),  # 980
    (51, None, 12, None, 2980),  # 981
    (51, None, 13, 12, 6985),  # 982
    (52, None, 12, None, 3402),  # 983
    (52, None, 12, None, 2709),  # 984
    (53, None, 13, 8, 5421),  # 985
    (53, None, 12, None, 1366),  # 986
    (54, None, 12, None, 2741),  # 987
    (54, None, 13, 5, 3498),  # 988
    (55, None, 12, None, 3538),  # 989
    (56, None, 12, None, 3492),  # 990
    (56, None, 13, 2, 7497),  # 991
    (56, None, 12, None, 3402),  # 992
    (56, None, 13, 10, 2710),  # 993
    (56, None, 12, None, 2731),  # 994
    (57, None, 12, None, 1366),  # 995
    (57, None, 13, 7, 2773),  # 996
    (57, None, 12, None, 2793),  # 997
    (57, None, 12, None, 1746),  # 998
    (58, None, 13, 3, 3749),  # 999
    (58, None, 12, None, 1701),  # 1000
    (58, None, 13, 12, 3659),  # 1001
    (58, None, 12, None, 1611),  # 1002
    (58, None, 12, None, 2731),  # 1003
    (59, None, 13, 9, 5466),  # 1004
    (59, None, 12, None, 1386),  # 1005
    (59, None, 12, None, 2921),  # 1006
    (59, None, 13, 5, 5970),  # 1007
    (59, None, 12, None, 2898),  # 1008
    (59, None, 12, None, 2853),  # 1009
    (59, None, 13, 2, 5707),  # 1010
    (59, None, 12, None, 1613),  # 1011
    (60, None, 13, 10, 2733),  # 1012
    (60, None, 12, None, 2741),  # 1013
    (60, None, 12, None, 1452),  # 1014
    (60, None, 13, 6, 2985),  # 1015
    (60, None, 12, None, 3497),  # 1016
    (61, None, 12, None, 3474),  # 1017
    (61, None, 13, 4, 6949),  # 1018
    (61, None, 12, None, 3365),  # 1019
    (61, None, 13, 12, 6741),  # 1020
    (62, None, 12, None, 2390),  # 1021
    (62, None, 12, None, 2741),  # 1022
    (62, None, 13, 9, 5556),  # 1023
    (63, None, 12, None, 1748),  # 1024
    (63, None, 12, None, 3753),  # 1025
    (63, None, 13, 5, 7570),  # 1026
    (63, None, 12, None, 3730),  # 1027
    (64, None, 12, None, 3366),  # 1028
    (64, None, 13, 2, 6742),  # 1029
    (64, None, 12, None, 2394),  # 1030
    (64, None, 13, 10, 2774),  # 1031
    (64, None, 12, None, 2922),  # 1032
    (64, None, 12, None, 1876),  # 1033
    (64, None, 13, 6, 3785),  # 1034
    (64, None, 12, None, 1865),  # 1035
    (64, None, 12, None, 1683),  # 1036
    (65, None, 13, 4, 5415),  # 1037
    (65, None, 12, None, 1323),  # 1038
    (65, None, 13, 12, 2667),  # 1039
    (66, None, 12, None, 1453),  # 1040
    (66, None, 12, None, 3434),  # 1041
    (66, None, 13, 9, 6996),  # 1042
    (66, None, 12, None, 2980),  # 1043
    (67, None, 12, None, 2889),  # 1044
    (67, None, 13, 5, 6805),  # 1045
    (68, None, 12, None, 2709),  # 1046
    (68, None, 12, None, 1325),  # 1047
    (68, None, 13, 1, 2733),  # 1048
    (68, None, 12, None, 2741),  # 1049
    (68, None, 13, 10, 6570),  # 1050
    (68, None, 12, None, 3538),  # 1051
    (68, None, 12, None, 3492),  # 1052
    (69, None, 13, 7, 7498),  # 1053
    (69, None, 12, None, 3402),  # 1054
    (69, None, 12, None, 2710),  # 1055
    (69, None, 13, 3, 5430),  # 1056
    (69, None, 12, None, 1366),  # 1057
    (70, None, 13, 12, 2773),  # 1058
    (70, None, 12, None, 2773),  # 1059
    (70, None, 12, None, 1746),  # 1060
    (70, None, 13, 8, 3749),  # 1061
    (70, None, 12, None, 1701),  # 1062
    (70, None, 12, None, 1355),  # 1063
    (70, None, 13, 5, 3223),  # 1064
    (71, None, 12, None, 2731),  # 1065
    (71, None, 12, None, 1370),  # 1066
    (71, None, 13, 1, 2773),  # 1067
    (71, None, 12, None, 2921),  # 1068
    (72, None, 13, 10, 6994),  # 1069
    (72, None, 12, None, 2898),  # 1070
    (72, None, 12, None, 2853),  # 1071
    (72, None, 13, 7, 5707),  # 1072
    (72, None, 12, None, 1613),  # 1073
    (73, None, 12, None, 2733),  # 1074
    (73, None, 13, 4, 5482),  # 1075
    (73, None, 12, None, 1452),  # 1076
    (74, None, 13, 12, 2985),  # 1077
    (74, None, 12, None, 3497),  # 1078
    (74, None, 12, None, 3474),  # 1079
    (74, None, 13, 8, 7461),  # 1080
    (75, None, 12, None, 3366),  # 1081
    (75, None, 12, None, 2637),  # 1082
    (75, None, 13, 6, 4781),  # 1083
    (76, None, 12, None, 2774),  # 1084
    (76, None, 12, None, 1460),  # 1085
    (76, None, 13, 2, 3497),  # 1086
    (77, None, 12, None, 3785),  # 1087
    (77, None, 13, 10, 3730),  # 1088
    (77, None, 12, None, 3731),  # 1089
    (77, None, 12, None, 3366),  # 1090
    (77, None, 13, 7, 2646),  # 1091
    (77, None, 12, None, 2651),  # 1092
    (77, None, 12, None, 858),  # 1093
    (78, None, 13, 3, 1749),  # 1094
    (78, None, 12, None, 1877),  # 1095
    (79, None, 12, None, 1865),  # 1096
    (80, None, 13, 1, 3731),  # 1097
    (80, None, 12, None, 1683),  # 1098
    (81, None, 13, 9, 5419),  # 1099
    (81, None, 12, None, 1323),  # 1100
    (81, None, 12, None, 2667),  # 1101
    (81, None, 13, 5, 5466),  # 1102
    (81, None, 12, None, 3434),  # 1103
    (82, None, 12, None, 2916),  # 1104
    (82, None, 13, 2, 5961),  # 1105
    (83, None, 12, None, 2889),  # 1106
    (83, None, 13, 10, 6805),  # 1107
    (84, None, 12, None, 2709),  # 1108
    (84, None, 12, None, 1325),  # 1109
    (85, None, 13, 7, 2733),  # 1110
    (85, None, 12, None, 2741),  # 1111
    (85, None, 12, None, 3498),  # 1112
    (86, None, 13, 3, 7076),  # 1113
    (86, None, 12, None, 3748),  # 1114
    (86, None, 12, None, 3402),  # 1115
    (86, None, 13, 1, 6805),  # 1116
    (86, None, 12, None, 2710),  # 1117
    (87, None, 13, 9, 5462),  # 1118
    (87, None, 12, None, 1370),  # 1119
    (88, None, 12, None, 2773),  # 1120
    (88, None, 13, 5, 5586),  # 1121
    (88, None, 12, None, 1746),  # 1122
    (88, None, 12, None, 3749),  # 1123
    (89, None, 13, 2, 3658),  # 1124
    (89, None, 12, None, 1611),  # 1125
    (90, None, 13, 10, 3223),  # 1126
    (90, None, 12, None, 2731),  # 1127
    (90, None, 12, None, 1370),  # 1128
    (90, None, 13, 7, 2901),  # 1129
    (90, None, 12, None, 2921),  # 1130
    (91, None, 12, None, 1874),  # 1131
    (92, None, 13, 4, 5925),  # 1132
    (92, None, 12, None, 2853),  # 1133
    (92, None, 13, 12, 5707),  # 1134
    (93, None, 12, None, 2645),  # 1135
    (93, None, 12, None, 685),  # 1136
    (93, None, 13, 9, 1387),  # 1137
    (93, None, 12, None, 1461),  # 1138
    (93, None, 12, None, 2985),  # 1139
    (93, None, 13, 5, 6994),  # 1140
    (94, None, 12, None, 3474),  # 1141
    (95, None, 12, None, 3365),  # 1142
    (95, None, 13, 2, 6733),  # 1143
    (96, None, 12, None, 2646),  # 1144
    (97, None, 13, 10, 5293),  # 1145
    (97, None, 12, None, 726),  # 1146
    (97, None, 12, None, 1717),  # 1147
    (97, None, 13, 6, 3497),  # 1148
    (97, None, 12, None, 3785),  # 1149
    (97, None, 12, None, 3730),  # 1150
    (98, None, 13, 4, 7462),  # 1151
    (98, None, 12, None, 3370),  # 1152
    (98, None, 13, 12, 2646),  # 1153
    (99, None, 12, None, 2651),  # 1154
    (99, None, 12, None, 858),  # 1155
    (100, None, 13, 9, 2773),  # 1156
    (100, None, 12, None, 1877),  # 1157
    (100, None, 12, None, 1865),  # 1158
    (101, None, 13, 5, 3731),  # 1159
    (102, None, 12, None, 1683),  # 1160
    (103, None, 12, None, 1323),  # 1161
    (103, None, 13, 2, 2651),  # 1162
    (104, None, 12, None, 2731),  # 1163
    (104, None, 13, 10, 6506),  # 1164
    (105, None, 12, None, 3498),  # 1165
    (106, None, 12, None, 2916),  # 1166
    (106, None, 13, 7, 5961),  # 1167
    (106, None, 12, None, 3401),  # 1168
    (107, None, 12, None, 2709),  # 1169
    (107, None, 13, 4, 5419),  # 1170
    (108, None, 12, None, 1357),  # 1171
    (108, None, 13, 12, 2733),  # 1172
    (108, None, 12, None, 2741),  # 1173
    (108, None, 12, None, 1450),  # 1174
    (109, None, 13, 9, 3493),  # 1175
    (109, None, 12, None, 3749),  # 1176
    (110, None, 12, None, 3402),  # 1177
    (110, None, 13, 6, 6805),  # 1178
    (110, None, 12, None, 2710),  # 1179
    (110, None, 12, None, 1366),  # 1180
    (111, None, 13, 2, 2741),  # 1181
    (112, None, 12, None, 2773),  # 1182
    (112, None, 13, 10, 6866),  # 1183
    (113, None, 12, None, 1746),  # 1184
    (114, None, 12, None, 3749),  # 1185
    (114, None, 13, 7, 3658),  # 1186
    (114, None, 12, None, 1675),  # 1187
    (114, None, 12, None, 3239),  # 1188
    (114, None, 13, 4, 5462),  # 1189
    (115, None, 12, None, 1370),  # 1190
    (115, None, 13, 12, 2777),  # 1191
    (115, None, 12, None, 2921),  # 1192
    (115, None, 12, None, 1874),  # 1193
    (115, None, 13, 8, 5925),  # 1194
    (115, None, 12, None, 2885),  # 1195
    (115, None, 12, None, 1611),  # 1196
    (115, None, 13, 3, 5291),  # 1197
    (115, None, 12, None, 1197),  # 1198
    (116, None, 12, None, 1387),  # 1199
    (116, None, 13, 2, 2922),  # 1200
    (117, None, 12, None, 2985),  # 1201
    (117, None, 13, 10, 7058),  # 1202
    (117, None, 12, None, 3490),  # 1203
    (118, None, 12, None, 3397),  # 1204
    (118, None, 13, 7, 6733),  # 1205
    (119, None, 12, None, 2646),  # 1206
    (120, None, 12, None, 1197),  # 1207
    (120, None, 13, 4, 1453),  # 1208
    (120, None, 12, None, 1749),  # 1209
    (120, None, 12, None, 3497),  # 1210
    (121, None, 13, 1, 7570),  # 1211
    (121, None, 12, None, 3746),  # 1212
    (122, None, 13, 9, 7462),  # 1213
    (122, None, 12, None, 3370),  # 1214
    (122, None, 12, None, 2646),  # 1215
    (122, None, 13, 6, 5302),  # 1216
    (122, None, 12, None, 858),  # 1217
    (122, None, 12, None, 1749),  # 1218
    (123, None, 13, 2, 3785),  # 1219
    (123, None, 12, None, 1865),  # 1220
    (123, None, 13, 10, 6803),  # 1221
    (124, None, 12, None, 1685),  # 1222
    (124, None, 12, None, 1323),  # 1223
    (125, None, 13, 7, 2651),  # 1224
    (126, None, 12, None, 2731),  # 1225
    (126, None, 12, None, 1386),  # 1226
    (127, None, 13, 3, 2901),  # 1227
    (127, None, 12, None, 2981),  # 1228
    (128, None, 12, None, 1865),  # 1229
    (128, None, 13, 1, 6805),  # 1230
    (128, None, 12, None, 2709),  # 1231
    (129, None, 13, 9, 5419),  # 1232
    (130, None, 12, None, 1357),  # 1233
    (131, None, 12, None, 2733),  # 1234
    (132, None, 13, 6, 5482),  # 1235
    (132, None, 12, None, 1458),  # 1236
    (132, None, 12, None, 3493),  # 1237
    (133, None, 13, 2, 7498),  # 1238
    (134, None, 12, None, 3402),  # 1239
    (135, None, 13, 10, 7445),  # 1240
    (135, None, 12, None, 3238),  # 1241
    (135, None, 12, None, 1366),  # 1242
    (136, None, 13, 7, 2869),  # 1243
    (136, None, 12, None, 2773),  # 1244
    (136, None, 12, None, 1746),  # 1245
    (136, None, 13, 4, 3749),  # 1246
    (137, None, 12, None, 3749),  # 1247
    (137, None, 13, 12, 3722),  # 1248
    (138, None, 12, None, 1675),  # 1249
    (138, None, 12, None, 3243),  # 1250
    (138, None, 13, 9, 6486),  # 1251
    (138, None, 12, None, 1386),  # 1252
    (138, None, 12, None, 2906),  # 1253
    (138, None, 13, 5, 5842),  # 1254
    (138, None, 12, None, 1874),  # 1255
    (139, None, 12, None, 1861),  # 1256
    (140, None, 13, 3, 5771),  # 1257
    (140, None, 12, None, 1675),  # 1258
    (141, None, 13, 10, 6315),  # 1259
    (142, None, 12, None, 1197),  # 1260
    (143, None, 12, None, 1387),  # 1261
    (143, None, 13, 7, 2922),  # 1262
    (143, None, 12, None, 2986),  # 1263
    (144, None, 12, None, 2962),  # 1264
    (144, None, 13, 4, 6981),  # 1265
    (144, None, 12, None, 3397),  # 1266
    (144, None, 12, None, 2709),  # 1267
    (144, None, 13, 1, 5293),  # 1268
    (144, None, 12, None, 1205),  # 1269
    (144, None, 13, 9, 2477),  # 1270
    (144, None, 12, None, 1749),  # 1271
    (144, None, 12, None, 3498),  # 1272
    (144, None, 13, 5, 7586),  # 1273
    (144, None, 12, None, 3746),  # 1274
    (145, None, 12, None, 3398),  # 1275
    (145, None, 13, 3, 6805),  # 1276
    (145, None, 12, None, 2646),  # 1277
    (146, None, 13, 10, 6486),  # 1278
    (146, None, 12, None, 1370),  # 1279
    (146, None, 12, None, 1749),  # 1280
    (146, None, 13, 7, 3786),  # 1281
    (146, None, 12, None, 1873),  # 1282
    (146, None, 12, None, 3747),  # 1283
    (146, None, 13, 4, 3402),  # 1284
    (146, None, 12, None, 1355),  # 1285
    (146, None, 13, 12, 2715),  # 1286
    (146, None, 12, None, 2733),  # 1287
    (147, None, 12, None, 1386),  # 1288
    (147, None, 13, 10, 2901),  # 1289
    (147, None, 12, None, 2981),  # 1290
    (147, None, 12, None, 1873),  # 1291
    (147, None, 13, 6, 6821),  # 1292
    (148, None, 12, None, 2837),  # 1293
    (148, None, 12, None, 1355),  # 1294
    (148, None, 13, 2, 2731),  # 1295
    (148, None, 12, None, 2733),  # 1296
    (148, None, 13, 10, 6506),  # 1297
    (148, None, 12, None, 1458),  # 1298
    (149, None, 12, None, 3497),  # 1299
    (149, None, 13, 7, 7498),  # 1300
    (149, None, 12, None, 3466),  # 1301
    (150, None, 12, None, 3349),  # 1302
    (151, None, 13, 4, 6477),  # 1303
    (151, None, 12, None, 1366),  # 1304
    (151, None, 13, 12, 2741),  # 1305
    (152, None, 12, None, 2773),  # 1306
    (152, None, 12, None, 1748),  # 1307
    (153, None, 13, 8, 6825),  # 1308
    (153, None, 12, None, 3781),  # 1309
    (153, None, 12, None, 3722),  # 1310
    (154, None, 13, 6, 3366),  # 1311
    (155, None, 12, None, 3243),  # 1312
    (155, None, 12, None, 2390),  # 1313
    (155, None, 13, 3, 2774),  # 1314
    (155, None, 12, None, 2922),  # 1315
    (155, None, 13, 10, 6356),  # 1316
    (156, None, 12, None, 1877),  # 1317
    (156, None, 12, None, 1861),  # 1318
    (157, None, 13, 7, 5771),  # 1319
    (157, None, 12, None, 1683),  # 1320
    (158, None, 12, None, 1323),  # 1321
    (158, None, 13, 5, 2395),  # 1322
    (158, None, 12, None, 1453),  # 1323
    (159, None, 12, None, 2922),  # 1324
    (159, None, 13, 1, 6996),  # 1325
    (160, None, 12, None, 2978),  # 1326
    (160, None, 13, 9, 6981),  # 1327
    (160, None, 12, None, 3397),  # 1328
    (161, None, 12, None, 2709),  # 1329
    (161, None, 13, 6, 5421),  # 1330
    (162, 161, 12, None, 1205),  # 1331
    (162, 172, 12, None, 1717),  # 1332
    (162, 172, 13, 2, 3498),  # 1333
    (163, 163, 12, None, 3498),  # 1334
    (163, 163, 13, 10, 6562),  # 1335
    (164, 163, 12, None, 3749),  # 1336
    (164, 163, 12, None, 3402),  # 1337
    (164, 173, 13, 7, 6933),  # 1338
    (164, 173, 12, None, 2710),  # 1339
    (165, 173, 12, None, 1366),  # 1340
    (165, 173, 13, 4, 2741),  # 1341
    (165, 174, 12, None, 1749),  # 1342
    (165, 174, 12, None, 1746),  # 1343
    (165, 174, 13, 2, 3747),  # 1344
    (165, 175, 12, None, 3749),  # 1345
    (166, 175, 13, 9, 3402),  # 1346
    (166, 175, 12, None, 1355),  # 1347
    (166, 175, 12, None, 2715),  # 1348
    (166, 175, 13, 6, 5466),  # 1349
    (166, 176, 12, None, 1386),  # 1350
    (166, 176, 12, None, 2917),  # 1351
    (166, 177, 13, 2, 5970),  # 1352
    (166, 177, 12, None, 1874),  # 1353
    (166, 177, 13, 10, 6949),  # 1354
    (166, 177, 12, None, 2853),  # 1355
    (166, 178, 12, None, 1611),  # 1356
    (166, 178, 13, 7, 2859),  # 1357
    (166, 178, 12, None, 2733),  # 1358
    (166, 178, 12, None, 1450),  # 1359
    (166, 178, 13, 4, 2921),  # 1360
    (166, 179, 12, None, 3497),  # 1361
    (166, 180, 12, None, 3410),  # 1362
    (166, 180, 13, 1, 6949),  # 1363
    (166, 180, 12, None, 3365),  # 1364
    (166, 180, 13, 9, 6733),  # 1365
    (166, 180, 12, None, 2390),  # 1366
    (166, 180, 12, None, 2741),  # 1367
    (166, 181, 13, 6, 5556),  # 1368
    (166, 181, 12, None, 1748),  # 1369
    (167, 181, 12, None, 3753),  # 1370
    (167, 181, 13, 3, 7570),  # 1371
    (168, 181, 12, None, 3730),  # 1372
    (168, 181, 13, 10, 6438),  # 1373
    (168, 181, 12, None, 3373),  # 1374
    (169, 182, 12, None, 2390),  # 1375
    (169, 182, 13, 7, 2902),  # 1376
    (169, 182, 12, None, 2922),  # 1377
    (169, 182, 12, None, 1748),  # 1378
    (169, 183, 13, 4, 3785),  # 1379
    (169, 183, 12, None, 1865),  # 1380
    (170, 184, 12, None, 1683),  # 1381
    (170, 184, 13, 1, 5419),  # 1382
    (170, 184, 12, None, 1323),  # 1383
    (171, 185, 13, 9, 2395),  # 1384
    (171, 185, 12, None, 1453),  # 1385
    (171, 185, 12, None, 2922),  # 1386
    (171, 186, 13, 5, 6996),  # 1387
    (171, 186, 12, None, 2980),  # 1388
    (171, 187, 12, None, 2885),  # 1389
    (171, 188, 13, 3, 6803),  # 1390
    (171, 188, 12, None, 2709),  # 1391
    (171, 188, 13, 10, 6445),  # 1392
    (188, None, 12, None, 1366),  # 1393
    (189, None, 12, None, 2741),  # 1394
    (189, None, 13, 7, 5930),  # 1395
    (189, None, 12, None, 3530),  # 1396
    (189, None, 12, None, 3492),  # 1397
    (189, None, 13, 4, 7497),  # 1398
    (189, None, 12, None, 3402),  # 1399
    (189, None, 12, None, 2710),  # 1400
    (189, None, 13, 1, 5421),  # 1401
    (189, None, 12, None, 1366),  # 1402
    (189, None, 13, 10, 2741),  # 1403
    (189, None, 12, None, 2773),  # 1404
    (189, None, 12, None, 1746),  # 1405
    (189, None, 13, 6, 3749),  # 1406
    (189, None, 12, None, 3749),  # 1407
    (189, None, 12, None, 3402),  # 1408
    (189, None, 13, 3, 2710),  # 1409
    (189, None, 12, None, 2731),  # 1410
    (189, None, 13, 10, 6490),  # 1411
    (189, None, 12, None, 1386),  # 1412
    (189, None, 12, None, 2921),  # 1413
    (189, None, 13, 7, 5970),  # 1414
    (189, None, 12, None, 1874),  # 1415
    (189, None, 12, None, 2853),  # 1416
    (189, None, 13, 5, 5707),  # 1417
    (189, None, 12, None, 1613),  # 1418
    (189, None, 12, None, 2731),  # 1419
    (189, None, 13, 1, 5482),  # 1420
    (189, None, 12, None, 1450),  # 1421
    (189, None, 13, 10, 2985),  # 1422
    (189, None, 12, None, 3497),  # 1423
    (189, None, 12, None, 3474),  # 1424
    (189, None, 13, 6, 6949),  # 1425
    (189, None, 12, None, 3365),  # 1426
    (189, None, 12, None, 2645),  # 1427
    (190, None, 13, 3, 4781),  # 1428
    (191, None, 12, None, 2741),  # 1429
    (191, None, 13, 11, 5556),  # 1430
    (191, None, 12, None, 1748),  # 1431
    (191, None, 12, None, 3753),  # 1432
    (191, None, 13, 7, 3730),  # 1433
    (191, None, 12, None, 3731),  # 1434
    (191, None, 12, None, 3366),  # 1435
    (191, None, 13, 5, 6742),  # 1436
    (191, None, 12, None, 2394),  # 1437
    (191, None, 12, None, 2774),  # 1438
    (191, None, 13, 1, 5844),  # 1439
    (191, None, 12, None, 1876),  # 1440
    (192, None, 13, 9, 6857),  # 1441
    (192, None, 12, None, 1865),  # 1442
    (192, None, 12, None, 1683),  # 1443
    (193, None, 13, 6, 5419),  # 1444
    (193, None, 12, None, 1323),  # 1445
    (193, None, 12, None, 2651),  # 1446
    (193, None, 13, 2, 2906),  # 1447
    (193, None, 12, None, 2922),  # 1448
    (194, None, 13, 10, 6484),  # 1449
    (194, None, 12, None, 2981),  # 1450
    (194, None, 12, None, 2889),  # 1451
    (195, None, 13, 8, 6803),  # 1452
    (195, None, 12, None, 2709),  # 1453
    (195, None, 12, None, 1325),  # 1454
    (196, None, 13, 4, 2733),  # 1455
    (196, None, 12, None, 2741),  # 1456
    (197, None, 12, None, 3498),  # 1457
    (197, None, 13, 1, 7076),  # 1458
    (197, None, 12, None, 3492),  # 1459
    (198, None, 13, 9, 7497),  # 1460
    (198, None, 12, None, 3402),  # 1461
    (198, None, 12, None, 2710),  # 1462
    (198, None, 13, 6, 5422),  # 1463
    (198, None, 12, None, 1366),  # 1464
    (198, None, 12, None, 2773),  # 1465
    (199, None, 13, 2, 5546),  # 1466
    (200, None, 12, None, 1746),  # 1467
    (200, None, 13, 10, 6821),  # 1468
    (201, None, 12, None, 3749),  # 1469
    (201, None, 12, None, 1610),  # 1470
    (201, None, 13, 8, 3223),  # 1471
    (201, None, 12, None, 2731),  # 1472
    (201, None, 12, None, 1338),  # 1473
    (201, None, 13, 5, 2773),  # 1474
    (201, None, 12, None, 2921),  # 1475
    (201, None, 12, None, 1874),  # 1476
    (201, None, 13, 1, 5797),  # 1477
    (201, None, 12, None, 2853),  # 1478
    (201, None, 13, 9, 6731),  # 1479
    (201, None, 12, None, 1613),  # 1480
    (201, None, 12, None, 2733),  # 1481
    (201, None, 13, 7, 5482),  # 1482
    (201, None, 12, None, 1452),  # 1483
    (201, None, 12, None, 2985),  # 1484
    (201, None, 13, 3, 6994),  # 1485
    (201, None, 12, None, 3474),  # 1486
    (202, None, 13, 11, 6949),  # 1487
    (202, None, 12, None, 3365),  # 1488
    (203, None, 12, None, 2645),  # 1489
    (203, None, 13, 8, 4781),  # 1490
    (203, None, 12, None, 2741),  # 1491
    (204, None, 12, None, 1460),  # 1492
    (204, None, 13, 4, 3497),  # 1493
    (204, None, 12, None, 3785),  # 1494
    (204, None, 12, None, 3730),  # 1495
    (204, None, 13, 2, 7461),  # 1496
    (204, None, 12, None, 3366),  # 1497
    (204, None, 13, 10, 2646),  # 1498
    (204, None, 12, None, 2651),  # 1499
    (204, None, 12, None, 726),  # 1500
    (205, None, 13, 6, 5845),  # 1501
    (205, None, 12, None, 1876),  # 1502
    (205, None, 12, None, 3785),  # 1503
    (206, None, 13, 3, 3730),  # 1504
    (206, None, 12, None, 1683),  # 1505
    (206, None, 13, 11, 5419),  # 1506
    (206, None, 12, None, 1323),  # 1507
    (206, None, 12, None, 2667),  # 1508
    (206, None, 13, 8, 5466),  # 1509
    (206, None, 12, None, 3434),  # 1510
    (206, None, 12, None, 2916),  # 1511
    (206, None, 13, 4, 5961),  # 1512
    (206, None, 12, None, 2889),  # 1513
    (206, None, 12, None, 2709),  # 1514
    (206, None, 13, 2, 5419),  # 1515
    (206, None, 12, None, 1325),  # 1516
    (206, None, 13, 10, 2733),  # 1517
    (206, None, 12, None, 2741),  # 1518
    (206, None, 12, None, 3498),  # 1519
    (206, None, 13, 6, 7076),  # 1520
    (207, None, 12, None, 3492),  # 1521
    (207, None, 12, None, 3402),  # 1522
    (207, None, 13, 3, 6805),  # 1523
    (207, None, 12, None, 2710),  # 1524
    (207, None, 13, 11, 5462),  # 1525
    (207, None, 12, None, 1366),  # 1526
    (207, None, 12, None, 2773),  # 1527
    (208, None, 13, 9, 5554),  # 1528
    (208, None, 12, None, 1746),  # 1529
    (208, None, 12, None, 3749),  # 1530
    (208, None, 13, 5, 3402),  # 1531
    (209, None, 12, None, 1611),  # 1532
    (209, None, 12, None, 3223),  # 1533
    (209, None, 13, 1, 5462),  # 1534
    (209, None, 12, None, 1370),  # 1535
    (209, None, 13, 10, 2773),  # 1536
    (209, None, 12, None, 2921),  # 1537
    (209, None, 12, None, 1874),  # 1538
    (209, None, 13, 6, 5797),  # 1539
    (209, None, 12, None, 2853),  # 1540
    (209, None, 12, None, 1611),  # 1541
    (209, None, 13, 3, 3243),  # 1542
    (209, None, 12, None, 685),  # 1543
    (209, None, 13, 11, 5483),  # 1544
    (209, None, 12, None, 1460),  # 1545
    (209, None, 12, None, 2985),  # 1546
    (209, None, 13, 7, 6994),  # 1547
    (209, None, 12, None, 3474),  # 1548
    (209, None, 12, None, 3365),  # 1549
    (209, None, 13, 5, 6733),  # 1550
    (209, None, 12, None, 2645),  # 1551
    (209, None, 12, None, 1197),  # 1552
    (209, None, 13, 1, 1453),  # 1553
    (209, None, 12, None, 1461),  # 1554
    (210, None, 13, 10, 6569),  # 1555
    (210, None, 12, None, 3785),  # 1556
    (210, None, 12, None, 3730),  # 1557
    (211, None, 13, 6, 7461),  # 1558
    (211, None, 12, None, 3370),  # 1559
    (211, None, 12, None, 2646),  # 1560
    (211, None, 13, 3, 5302),  # 1561
    (211, None, 12, None, 858),  # 1562
    (211, None, 13, 12, 5845),  # 1563
    (211, None, 12, None, 1876),  # 1564
    (211, None, 12, None, 3913),  # 1565
    (211, None, 13, 8, 3730),  # 1566
    (211, None, 12, None, 1683),  # 1567
    (211, None, 12, None, 1323),  # 1568
    (211, None, 13, 5, 2647),  # 1569
    (212, None, 12, None, 2731),  # 1570
    (212, None, 12, None, 1370),  # 1571
    (212, None, 13, 1, 6869),  # 1572
    (213, None, 12, None, 2916),  # 1573
    (213, None, 13, 11, 5961),  # 1574
    (213, None, 12, None, 2889),  # 1575
    (213, None, 12, None, 2709),  # 1576
    (213, None, 13, 7, 5419),  # 1577
    (213, None, 12, None, 1325),  # 1578
    (213, None, 12, None, 2733),  # 1579
    (213, None, 13, 3, 5482),  # 1580
    (213, None, 12, None, 1450),  # 1581
    (213, None, 12, None, 2981),  # 1582
    (213, None, 13, 1, 6985),  # 1583
    (213, None, 12, None, 3402),  # 1584
    (213, None, 13, 8, 6805),  # 1585
    (213, None, 12, None, 2710),  # 1586
    (213, None, 12, None, 1366),  # 1587
    (213, None, 13, 5, 2741),  # 1588
    (213, None, 12, None, 2773),  # 1589
    (213, None, 12, None, 1490),  # 1590
    (213, None, 13, 1, 3493),  # 1591
    (214, None, 12, None, 3749),  # 1592
    (214, None, 13, 9, 3658),  # 1593
    (214, None, 12, None, 1611),  # 1594
    (214, None, 12, None, 3239),  # 1595
    (215, None, 13, 7, 5462),  # 1596
    (215, None, 12, None, 1370),  # 1597
    (215, None, 12, None, 2773),  # 1598
    (215, None, 13, 3, 5842),  # 1599
    (215, None, 12, None, 1874),  # 1600
    (215, None, 13, 11, 5925),  # 1601
    (215, None, 12, None, 2885),  # 1602
    (215, None, 12, None, 1611),  # 1603
    (215, None, 13, 8, 5291),  # 1604
    (215, None, 12, None, 1197),  # 1605
    (215, None, 12, None, 1387),  # 1606
    (215, None, 13, 4, 2922),  # 1607
    (215, None, 12, None, 2985),  # 1608
    (215, None, 12, None, 2898),  # 1609
    (215, None, 13, 2, 6981),  # 1610
    (215, None, 12, None, 3397),  # 1611
    (215, None, 13, 10, 6733),  # 1612
    (215, None, 12, None, 2645),  # 1613
    (215, None, 12, None, 1197),  # 1614
    (216, None, 13, 6, 1453),  # 1615
    (216, None, 12, None, 1717),  # 1616
    (216, None, 12, None, 3497),  # 1617
    (216, None, 13, 3, 7570),  # 1618
    (216, None, 12, None, 3746),  # 1619
    (216, None, 13, 12, 7462),  # 1620
    (216, None, 12, None, 3370),  # 1621
    (216, None, 12, None, 2646),  # 1622
    (216, None, 13, 8, 5302),  # 1623
    (217, None, 12, None, 858),  # 1624
    (217, None, 12, None, 1749),  # 1625
    (217, None, 13, 4, 3785),  # 1626
    (217, None, 12, None, 1865),  # 1627
    (217, None, 12, None, 3731),  # 1628
    (217, None, 13, 2, 3370),  # 1629
    (217, None, 12, None, 1323),  # 1630
    (217, None, 13, 10, 2647),  # 1631
    (217, None, 12, None, 2731),  # 1632
    (217, None, 12, None, 1386),  # 1633
    (217, None, 13, 7, 6997),  # 1634
    (217, None, 12, None, 2916),  # 1635
    (217, None, 12, None, 1865),  # 1636
    (217, None, 13, 3, 5779),  # 1637
    (217, None, 12, None, 2709),  # 1638
    (217, None, 13, 11, 5419),  # 1639
    (217, None, 12, None, 1357),  # 1640
    (217, None, 12, None, 2733),  # 1641
    (217, None, 13, 9, 5482),  # 1642
    (217, None, 12, None, 1458),  # 1643
    (218, None, 12, None, 2981),  # 1644
    (218, None, 13, 5, 6986),  # 1645
    (218, None, 12, None, 3402),  # 1646
    (218, None, 12, None, 2837),  # 1647
    (219, None, 13, 1, 5453),  # 1648
    (219, None, 12, None, 1366),  # 1649
    (219, None, 13, 10, 2741),  # 1650
    (219, None, 12, None, 2773),  # 1651
    (220, None, 12, None, 1746),  # 1652
    (220, None, 13, 6, 3493),  # 1653
    (220, None, 12, None, 3749),  # 1654
    (221, None, 12, None, 3722),  # 1655
    (221, None, 13, 4, 3350),  # 1656
    (221, None, 12, None, 3239),  # 1657
    (222, None, 13, 12, 6486),  # 1658
    (222, None, 12, None, 1370),  # 1659
    (222, None, 12, None, 2777),  # 1660
    (223, None, 13, 8, 5842),  # 1661
    (223, None, 12, None, 1874),  # 1662
    (223, None, 12, None, 1861),  # 1663
    (223, None, 13, 5, 5771),  # 1664
    (223, None, 12, None, 1675),  # 1665
    (223, None, 12, None, 1195),  # 1666
    (223, None, 13, 2, 2395),  # 1667
    (223, None, 12, None, 1387),  # 1668
    (223, None, 13, 10, 2922),  # 1669
    (223, None, 12, None, 2986),  # 1670
    (223, None, 12, None, 2962),  # 1671
    (223, None, 13, 6, 6981),  # 1672
    (224, None, 12, None, 3397),  # 1673
    (224, None, 12, None, 2709),  # 1674
    (224, None, 13, 4, 5293),  # 1675
    (224, None, 12, None, 1197),  # 1676
    (224, None, 13, 12, 1453),  # 1677
    (224, None, 12, None, 1749),  # 1678
    (224, None, 12, None, 3498),  # 1679
    (224, None, 13, 8, 7586),  # 1680
    (225, None, 12, None, 3746),  # 1681
    (225, None, 12, None, 3398),  # 1682
    (225, None, 13, 5, 6805),  # 1683
    (226, None, 12, None, 2646),  # 1684
    (226, None, 12, None, 1370),  # 1685
    (226, None, 13, 3, 2773),  # 1686
    (226, None, 12, None, 2921),  # 1687
    (227, None, 12, None, 1874),  # 1688
    (227, None, 13, 1, 3749),  # 1689
    (227, None, 12, None, 2853),  # 1690
    (227, None, 13, 8, 5707),  # 1691
    (227, None, 12, None, 2637),  # 1692
    (227, None, 12, None, 1195),  # 1693
    (227, None, 13, 5, 1371),  # 1694
    (227, None, 12, None, 1453),  # 1695
    (227, None, 12, None, 2921),  # 1696
    (227, None, 13, 2, 6994),  # 1697
    (227, None, 12, None, 3474),  # 1698
    (227, None, 13, 9, 7461),  # 1699
    (227, None, 12, None, 3365),  # 1700
    (227, None, 12, None, 2645),  # 1701
    (227, None, 13, 8, 5293),  # 1702
    (227, None, 12, None, 694),  # 1703
    (228, None, 12, None, 1461),  # 1704
    (228, None, 13, 4, 3497),  # 1705
    (228, None, 12, None, 3785),  # 1706
    (228, None, 12, None, 3730),  # 1707
    (228, None, 13, 1, 7461),  # 1708
    (228, None, 12, None, 3366),  # 1709
    (228, None, 13, 8, 2646),  # 1710
    (229, None, 12, None, 2647),  # 1711
    (229, None, 12, None, 726),  # 1712
    (229, None, 13, 5, 5845),  # 1713
    (229, None, 12, None, 1748),  # 1714
    (229, None, 12, None, 3785),  # 1715
    (230, None, 13, 2, 3730),  # 1716
    (230, None, 12, None, 1683),  # 1717
    (230, None, 13, 10, 5419),  # 1718
    (230, None, 12, None, 1323),  # 1719
    (230, None, 12, None, 2651),  # 1720
    (230, None, 13, 7, 5466),  # 1721
    (230, None, 12, None, 1386),  # 1722
    (230, None, 12, None, 2917),  # 1723
    (230, None, 13, 4, 5961),  # 1724
    (230, None, 12, None, 2889),  # 1725
    (230, None, 12, None, 2709),  # 1726
    (230, None, 13, 1, 5419),  # 1727
    (230, None, 12, None, 1325),  # 1728
    (230, None, 13, 9, 2733),  # 1729
    (230, None, 12, None, 2741),  # 1730
    (230, None, 12, None, 1450),  # 1731
    (230, None, 13, 5, 2981),  # 1732
    (230, None, 12, None, 3493),  # 1733
    (230, None, 12, None, 3402),  # 1734
    (230, None, 13, 3, 6805),  # 1735
    (231, None, 12, None, 3222),  # 1736
    (231, None, 13, 11, 5422),  # 1737
    (231, None, 12, None, 1366),  # 1738
    (231, None, 12, None, 2741),  # 1739
    (231, None, 13, 7, 5554),  # 1740
    (232, None, 12, None, 1746),  # 1741
    (232, None, 12, None, 3749),  # 1742
    (232, None, 13, 4, 7754),  # 1743
    (233, None, 12, None, 1610),  # 1744
    (233, None, 13, 12, 3223),  # 1745
    (233, None, 12, None, 3243),  # 1746
    (233, None, 12, None, 1370),  # 1747
    (234, None, 13, 10, 2774),  # 1748
    (234, None, 12, None, 2921),  # 1749
    (234, None, 12, None, 1874),  # 1750
    (235, None, 13, 6, 5797),  # 1751
    (235, None, 12, None, 2853),  # 1752
    (235, None, 12, None, 1611),  # 1753
    (235, None, 13, 2, 5275),  # 1754
    (235, None, 12, None, 1195),  # 1755
    (235, None, 13, 11, 1387),  # 1756
    (235, None, 12, None, 1453),  # 1757
    (235, None, 12, None, 2985),  # 1758
    (235, None, 13, 7, 6994),  # 1759
    (235, None, 12, None, 3474),  # 1760
    (235, None, 12, None, 3365),  # 1761
    (235, None, 13, 4, 6731),  # 1762
    (235, None, 12, None, 2645),  # 1763
    (236, None, 13, 12, 5293),  # 1764
    (236, None, 12, None, 694),  # 1765
    (236, None, 12, None, 1461),  # 1766
    (236, None, 13, 9, 3498),  # 1767
    (236, None, 12, None, 3785),  # 1768
    (236, None, 12, None, 3730),  # 1769
    (236, None, 13, 6, 7461),  # 1770
    (236, None, 12, None, 3370),  # 1771
    (237, None, 12, None, 2646),  # 1772
    (237, None, 13, 3, 5302),  # 1773
    (237, None, 12, None, 1366),  # 1774
    (237, None, 13, 12, 1749),  # 1775
    (237, None, 12, None, 1877),  # 1776
    (237, None, 12, None, 1865),  # 1777
    (237, None, 13, 7, 3731),  # 1778
    (237, None, 12, None, 1683),  # 1779
    (237, None, 12, None, 1323),  # 1780
    (238, None, 13, 5, 2647),  # 1781
    (238, None, 12, None, 2731),  # 1782
    (238, None, 12, None, 1370),  # 1783
    (238, None, 13, 1, 2773),  # 1784
    (238, None, 12, None, 2917),  # 1785
    (238, None, 13, 10, 5962),  # 1786
    (238, None, 12, None, 2889),  # 1787
    (238, None, 12, None, 2709),  # 1788
    (239, None, 13, 6, 5419),  # 1789
    (239, None, 12, None, 1325),  # 1790
    (239, None, 12, None, 2733),  # 1791
    (239, None, 13, 2, 5482),  # 1792
    (239, None, 12, None, 1450),  # 1793
    (239, None, 13, 11, 2981),  # 1794
    (239, None, 12, None, 3493),  # 1795
    (239, None, 12, None, 3402),  # 1796
    (239, None, 13, 7, 7445),  # 1797
    (239, None, 12, None, 3222),  # 1798
    (239, None, 12, None, 2382),  # 1799
    (239, None, 13, 4, 2733),  # 1800
    (240, None, 12, None, 2773),  # 1801
    (240, None, 12, None, 1490),  # 1802
    (240, None, 13, 1, 3493),  # 1803
    (241, None, 12, None, 3749),  # 1804
    (241, None, 13, 8, 3722),  # 1805
    (241, None, 12, None, 1675),  # 1806
    (241, None, 12, None, 3223),  # 1807
    (241, None, 13, 6, 2390),  # 1808
    (241, None, 12, None, 1371),  # 1809
    (241, None, 12, None, 2778),  # 1810
    (241, None, 13, 2, 5844),  # 1811
    (241, None, 12, None, 1874),  # 1812
    (241, None, 13, 11, 5957),  # 1813
    (241, None, 12, None, 2885),  # 1814
    (241, None, 12, None, 2699),  # 1815
    (241, None, 13, 8, 5291),  # 1816
    (241, None, 12, None, 1197),  # 1817
    (242, None, 12, None, 2411),  # 1818
    (242, None, 13, 4, 2922),  # 1819
    (242, None, 12, None, 2986),  # 1820
    (242, None, 12, None, 2898),  # 1821
    (242, None, 13, 1, 6981),  # 1822
    (242, None, 12, None, 3397),  # 1823
    (242, None, 13, 8, 6803),  # 1824
    (242, None, 12, None, 2645),  # 1825
    (242, None, 12, None, 1197),  # 1826
    (242, None, 13, 6, 2477),  # 1827
    (242, None, 12, None, 1717),  # 1828
    (242, None, 12, None, 3498),  # 1829
    (243, None, 13, 3, 7572),  # 1830
    (243, None, 12, None, 3746),  # 1831
    (243, None, 13, 11, 7493),  # 1832
    (243, None, 12, None, 3402),  # 1833
    (243, None, 12, None, 2710),  # 1834
    (243, None, 13, 7, 5430),  # 1835
    (243, None, 12, None, 1370),  # 1836
    (243, None, 12, None, 2773),  # 1837
    (243, None, 13, 4, 5834),  # 1838
    (243, None, 12, None, 1874),  # 1839
    (243, None, 12, None, 3747),  # 1840
    (243, None, 13, 1, 3402),  # 1841
    (243, None, 12, None, 1355),  # 1842
    (243, None, 13, 9, 2711),  # 1843
    (244, None, 12, None, 2731),  # 1844
    (244, None, 12, None, 1370),  # 1845
    (244, None, 13, 5, 2773),  # 1846
    (244, None, 12, None, 2917),  # 1847
    (245, None, 12, None, 1874),  # 1848
    (245, None, 13, 4, 5797),  # 1849
    (245, None, 12, None, 2725),  # 1850
    (245, None, 12, None, 1355),  # 1851
    (245, None, 13, 2, 2715),  # 1852
    (245, None, 12, None, 2733),  # 1853
    (246, None, 13, 7, 5482),  # 1854
    (246, None, 12, None, 1458),  # 1855
    (246, None, 12, None, 2985),  # 1856
    (246, None, 13, 5, 6994),  # 1857
    (246, None, 12, None, 3474),  # 1858
    (246, None, 12, None, 3365),  # 1859
    (247, None, 13, 3, 6733),  # 1860
    (248, None, 12, None, 2390),  # 1861
    (248, None, 13, 8, 2733),  # 1862
    (248, None, 12, None, 2774),  # 1863
    (249, None, 12, None, 1492),  # 1864
    (250, None, 13, 5, 3497),  # 1865
    (250, None, 12, None, 3781),  # 1866
    (250, None, 12, None, 3722),  # 1867
    (251, None, 13, 4, 3366),  # 1868
    (251, None, 12, None, 3367),  # 1869
    (251, None, 13, 10, 2390),  # 1870
    (251, None, 12, None, 2395),  # 1871
    (251, None, 12, None, 2778),  # 1872
)

YEAR_START_MS: Tuple[int, ...] = (
    -43450506000000, -43419920400000, -43386742800000, -43356157200000,  # 593
    -43325485200000, -43292307600000, -43261722000000, -43231136400000,  # 597
    -43197958800000, -43167286800000, -43134195600000, -43103523600000,  # 601
    -43072938000000, -43039760400000, -43009174800000, -42978502800000,  # 605
    -42945325200000, -42914739600000, -42881562000000, -42850976400000,  # 609
    -42820304400000, -42787126800000, -42756541200000, -42725955600000,  # 613
    -42692778000000, -42662106000000, -42631520400000, -42598342800000,  # 617
    -42567757200000, -42534579600000, -42503994000000, -42473322000000,  # 621
    -42440144400000, -42409558800000, -42378973200000, -42345795600000,  # 625
    -42315123600000, -42281946000000, -42251360400000, -42220774800000,  # 629
    -42187597200000, -42156925200000, -42126339600000, -42093162000000,  # 633
    -42062576400000, -42031904400000, -41998726800000, -41968141200000,  # 637
    -41934963600000, -41904378000000, -41873706000000, -41840614800000,  # 641
    -41809942800000, -41779357200000, -41746179600000, -41715594000000,  # 645
    -41682416400000, -41651744400000, -41621158800000, -41587981200000,  # 649
    -41557395600000, -41526723600000, -41493546000000, -41462960400000,  # 653
    -41432374800000, -41399197200000, -41368525200000, -41335434000000,  # 657
    -41304762000000, -41274176400000, -41240998800000, -41210413200000,  # 661
    -41179741200000, -41146563600000, -41115978000000, -41082800400000,  # 665
    -41052214800000, -41021542800000, -40988365200000, -40957779600000,  # 669
    -40927194000000, -40894016400000, -40863344400000, -40832758800000,  # 673
    -40799581200000, -40768995600000, -40735818000000, -40705146000000,  # 677
    -40674560400000, -40641382800000, -40610797200000, -40580125200000,  # 681
    -40547034000000, -40516362000000, -40483184400000, -40452598800000,  # 685
    -40422013200000, -40388835600000, -40358163600000, -40327578000000,  # 689
    -40294400400000, -40263814800000, -40233142800000, -40199965200000,  # 693
    -40169379600000, -40136202000000, -40105530000000, -40074944400000,  # 697
    -40041766800000, -40011181200000, -39980595600000, -39947418000000,  # 701
    -39916746000000, -39886160400000, -39852982800000, -39822310800000,  # 705
    -39789219600000, -39758634000000, -39728048400000, -39694870800000,  # 709
    -39664198800000, -39633526800000, -39600349200000, -39569763600000,  # 713
    -39536586000000, -39506000400000, -39475414800000, -39442237200000,  # 717
    -39411651600000, -39380979600000, -39347802000000, -39317130000000,  # 721
    -39286544400000, -39253366800000, -39222781200000, -39189603600000,  # 725
    -39159018000000, -39128432400000, -39095254800000, -39064582800000,  # 729
    -39033910800000, -39000819600000, -38970147600000, -38937056400000,  # 733
    -38906470800000, -38875798800000, -38842621200000, -38812035600000,  # 737
    -38781363600000, -38748186000000, -38717600400000, -38686928400000,  # 741
    -38653837200000, -38623251600000, -38590074000000, -38559402000000,  # 745
    -38528816400000, -38495638800000, -38464966800000, -38434381200000,  # 749
    -38401203600000, -38370618000000, -38337440400000, -38306854800000,  # 753
    -38276182800000, -38243005200000, -38212419600000, -38181747600000,  # 757
    -38148570000000, -38118070800000, -38084893200000, -38054221200000,  # 761
    -38023635600000, -37990458000000, -37959786000000, -37929200400000,  # 765
    -37896022800000, -37865350800000, -37834765200000, -37801674000000,  # 769
    -37771002000000, -37737824400000, -37707238800000, -37676566800000,  # 773
    -37643389200000, -37612803600000, -37582218000000, -37548954000000,  # 777
    -37518368400000, -37487869200000, -37454691600000, -37424019600000,  # 781
    -37390842000000, -37360170000000, -37329584400000, -37296406800000,  # 785
    -37265821200000, -37235235600000, -37202058000000, -37171472400000,  # 789
    -37138294800000, -37107622800000, -37076950800000, -37043773200000,  # 793
    -37013187600000, -36982602000000, -36949424400000, -36918838800000,  # 797
    -36888253200000, -36855075600000, -36824403600000, -36791226000000,  # 801
    -36760640400000, -36729968400000, -36696790800000, -36666291600000,  # 805
    -36635619600000, -36602442000000, -36571856400000, -36538678800000,  # 809
    -36508006800000, -36477421200000, -36444243600000, -36413658000000,  # 813
    -36383072400000, -36349894800000, -36319222800000, -36288637200000,  # 817
    -36255459600000, -36224787600000, -36191610000000, -36161024400000,  # 821
    -36130438800000, -36097347600000, -36066675600000, -36036003600000,  # 825
    -36002826000000, -35972240400000, -35939062800000, -35908390800000,  # 829
    -35877805200000, -35844714000000, -35814042000000, -35783456400000,  # 833
    -35750278800000, -35719606800000, -35689021200000, -35655843600000,  # 837
    -35625258000000, -35592080400000, -35561494800000, -35530909200000,  # 841
    -35497731600000, -35467059600000, -35436387600000, -35403210000000,  # 845
    -35372624400000, -35339446800000, -35308861200000, -35278275600000,  # 849
    -35245098000000, -35214512400000, -35183754000000, -35150662800000,  # 853
    -35119990800000, -35089405200000, -35056227600000, -35025642000000,  # 857
    -34992464400000, -34961878800000, -34931293200000, -34898115600000,  # 861
    -34867443600000, -34836771600000, -34803594000000, -34773008400000,  # 865
    -34739917200000, -34709245200000, -34678659600000, -34645482000000,  # 869
    -34614810000000, -34584138000000, -34551046800000, -34520461200000,  # 873
    -34489875600000, -34456698000000, -34426112400000, -34392934800000,  # 877
    -34362262800000, -34331677200000, -34298499600000, -34267827600000,  # 881
    -34237242000000, -34204064400000, -34173478800000, -34140301200000,  # 885
    -34109715600000, -34079043600000, -34045952400000, -34015194000000,  # 889
    -33984608400000, -33951430800000, -33920845200000, -33890259600000,  # 893
    -33857082000000, -33826496400000, -33793318800000, -33762646800000,  # 897
    -33732061200000, -33698883600000, -33668211600000, -33637626000000,  # 901
    -33604534800000, -33573862800000, -33540771600000, -33510099600000,  # 905
    -33479427600000, -33446250000000, -33415664400000, -33385078800000,  # 909
    -33351901200000, -33321315600000, -33290730000000, -33257552400000,  # 913
    -33226880400000, -33193702800000, -33163030800000, -33132445200000,  # 917
    -33099267600000, -33068682000000, -33038096400000, -33004918800000,  # 921
    -32974333200000, -32941155600000, -32910483600000, -32879811600000,  # 925
    -32846634000000, -32816048400000, -32785462800000, -32752371600000,  # 929
    -32721699600000, -32691114000000, -32657936400000, -32627264400000,  # 933
    -32594173200000, -32563587600000, -32532915600000, -32499738000000,  # 937
    -32469152400000, -32438480400000, -32405302800000, -32374717200000,  # 941
    -32341539600000, -32310867600000, -32280282000000, -32247104400000,  # 945
    -32216518800000, -32185933200000, -32152755600000, -32122083600000,  # 949
    -32091498000000, -32058320400000, -32027648400000, -31994470800000,  # 953
    -31963885200000, -31933299600000, -31900122000000, -31869536400000,  # 957
    -31838864400000, -31805686800000, -31775101200000, -31741923600000,  # 961
    -31711338000000, -31680666000000, -31647574800000, -31616902800000,  # 965
    -31586317200000, -31553139600000, -31522467600000, -31491882000000,  # 969
    -31458704400000, -31428118800000, -31394941200000, -31364355600000,  # 973
    -31333770000000, -31300592400000, -31269920400000, -31239248400000,  # 977
    -31206070800000, -31175485200000, -31142307600000, -31111722000000,  # 981
    -31081136400000, -31047958800000, -31017373200000, -30986701200000,  # 985
    -30953523600000, -30922851600000, -30892266000000, -30859088400000,  # 989
    -30828502800000, -30795411600000, -30764739600000, -30734154000000,  # 993
    -30700976400000, -30670304400000, -30639718800000, -30606541200000,  # 997
    -30575955600000, -30542778000000, -30512192400000, -30481520400000,  # 1001
    -30448342800000, -30417757200000, -30387085200000, -30353907600000,  # 1005
    -30323322000000, -30292736400000, -30259558800000, -30228973200000,  # 1009
    -30195795600000, -30165123600000, -30134538000000, -30101360400000,  # 1013
    -30070688400000, -30040102800000, -30006925200000, -29976339600000,  # 1017
    -29943162000000, -29912576400000, -29881904400000, -29848726800000,  # 1021
    -29818141200000, -29787469200000, -29754291600000, -29723706000000,  # 1025
    -29693120400000, -29659942800000, -29629357200000, -29596179600000,  # 1029
    -29565507600000, -29534922000000, -29501744400000, -29471158800000,  # 1033
    -29440573200000, -29407395600000, -29376810000000, -29343632400000,  # 1037
    -29312960400000, -29282288400000, -29249110800000, -29218525200000,  # 1041
    -29187939600000, -29154762000000, -29124176400000, -29093590800000,  # 1045
    -29060413200000, -29029741200000, -28996563600000, -28965891600000,  # 1049
    -28935306000000, -28902128400000, -28871542800000, -28840957200000,  # 1053
    -28807779600000, -28777194000000, -28744016400000, -28713344400000,  # 1057
    -28682758800000, -28649581200000, -28618995600000, -28588410000000,  # 1061
    -28555232400000, -28524560400000, -28493974800000, -28460797200000,  # 1065
    -28430125200000, -28396947600000, -28366362000000, -28335776400000,  # 1069
    -28302598800000, -28272013200000, -28241341200000, -28208163600000,  # 1073
    -28177578000000, -28144400400000, -28113728400000, -28083142800000,  # 1077
    -28049965200000, -28019379600000, -27988794000000, -27955616400000,  # 1081
    -27924944400000, -27894358800000, -27861181200000, -27830509200000,  # 1085
    -27797418000000, -27766746000000, -27736160400000, -27703069200000,  # 1089
    -27672397200000, -27641811600000, -27608634000000, -27577962000000,  # 1093
    -27547376400000, -27514198800000, -27483613200000, -27450435600000,  # 1097
    -27419850000000, -27389178000000, -27356000400000, -27325328400000,  # 1101
    -27294742800000, -27261565200000, -27230979600000, -27197802000000,  # 1105
    -27167216400000, -27136630800000, -27103453200000, -27072781200000,  # 1109
    -27042109200000, -27008931600000, -26978346000000, -26947760400000,  # 1113
    -26914582800000, -26883997200000, -26850819600000, -26820234000000,  # 1117
    -26789562000000, -26756384400000, -26725798800000, -26695126800000,  # 1121
    -26662035600000, -26631450000000, -26598272400000, -26567600400000,  # 1125
    -26537014800000, -26503837200000, -26473165200000, -26442579600000,  # 1129
    -26409402000000, -26378816400000, -26345638800000, -26315053200000,  # 1133
    -26284467600000, -26251290000000, -26220618000000, -26189946000000,  # 1137
    -26156768400000, -26126182800000, -26095597200000, -26062419600000,  # 1141
    -26031834000000, -25998656400000, -25968070800000, -25937398800000,  # 1145
    -25904221200000, -25873549200000, -25842963600000, -25809786000000,  # 1149
    -25779200400000, -25746109200000, -25715437200000, -25684851600000,  # 1153
    -25651674000000, -25621002000000, -25590416400000, -25557238800000,  # 1157
    -25526653200000, -25496067600000, -25462890000000, -25432218000000,  # 1161
    -25399040400000, -25368368400000, -25337782800000, -25304605200000,  # 1165
    -25274019600000, -25243434000000, -25210256400000, -25179670800000,  # 1169
    -25146493200000, -25115821200000, -25085235600000, -25052058000000,  # 1173
    -25021386000000, -24990800400000, -24957622800000, -24927037200000,  # 1177
    -24896451600000, -24863274000000, -24832602000000, -24799424400000,  # 1181
    -24768838800000, -24738166800000, -24705075600000, -24674490000000,  # 1185
    -24643818000000, -24610640400000, -24580054800000, -24546877200000,  # 1189
    -24516205200000, -24485619600000, -24452442000000, -24421856400000,  # 1193
    -24391270800000, -24358093200000, -24327507600000, -24296835600000,  # 1197
    -24263658000000, -24232986000000, -24199808400000, -24169222800000,  # 1201
    -24138637200000, -24105459600000, -24074874000000, -24044288400000,  # 1205
    -24011110800000, -23980438800000, -23949766800000, -23916589200000,  # 1209
    -23886003600000, -23852826000000, -23822240400000, -23791654800000,  # 1213
    -23758477200000, -23727891600000, -23697219600000, -23664042000000,  # 1217
    -23633456400000, -23600278800000, -23569693200000, -23539107600000,  # 1221
    -23505930000000, -23475258000000, -23444672400000, -23411494800000,  # 1225
    -23380822800000, -23350237200000, -23317059600000, -23286474000000,  # 1229
    -23253296400000, -23222710800000, -23192038800000, -23158861200000,  # 1233
    -23128275600000, -23097603600000, -23064426000000, -23033840400000,  # 1237
    -23000662800000, -22970077200000, -22939491600000, -22906314000000,  # 1241
    -22875642000000, -22845056400000, -22811878800000, -22781206800000,  # 1245
    -22748115600000, -22717530000000, -22686858000000, -22653680400000,  # 1249
    -22623094800000, -22592422800000, -22559245200000, -22528659600000,  # 1253
    -22498074000000, -22464896400000, -22434310800000, -22401133200000,  # 1257
    -22370547600000, -22339875600000, -22306698000000, -22276026000000,  # 1261
    -22245440400000, -22212262800000, -22181677200000, -22151091600000,  # 1265
    -22117914000000, -22087328400000, -22054150800000, -22023478800000,  # 1269
    -21992806800000, -21959629200000, -21929043600000, -21898458000000,  # 1273
    -21865280400000, -21834694800000, -21801517200000, -21770931600000,  # 1277
    -21740259600000, -21707082000000, -21676496400000, -21645824400000,  # 1281
    -21612733200000, -21582147600000, -21548970000000, -21518298000000,  # 1285
    -21487712400000, -21454534800000, -21423862800000, -21393277200000,  # 1289
    -21360099600000, -21329514000000, -21298928400000, -21265750800000,  # 1293
    -21235078800000, -21201901200000, -21171315600000, -21140643600000,  # 1297
    -21107466000000, -21076880400000, -21046294800000, -21013117200000,  # 1301
    -20982531600000, -20949354000000, -20918682000000, -20888096400000,  # 1305
    -20854918800000, -20824246800000, -20793661200000, -20760570000000,  # 1309
    -20729898000000, -20699312400000, -20666134800000, -20635462800000,  # 1313
    -20602371600000, -20571699600000, -20541114000000, -20507936400000,  # 1317
    -20477350800000, -20446765200000, -20413587600000, -20382915600000,  # 1321
    -20352243600000, -20319066000000, -20288480400000, -20255302800000,  # 1325
    -20224717200000, -20194131600000, -20160954000000, -20130368400000,  # 1329
    -20099696400000, -20066518800000, -20035846800000, -20002755600000,  # 1333
    -19972083600000, -19941498000000, -19908320400000, -19877734800000,  # 1337
    -19847149200000, -19813971600000, -19783299600000, -19752714000000,  # 1341
    -19719536400000, -19688864400000, -19655773200000, -19625187600000,  # 1345
    -19594515600000, -19561338000000, -19530752400000, -19500080400000,  # 1349
    -19466902800000, -19436317200000, -19403139600000, -19372554000000,  # 1353
    -19341968400000, -19308790800000, -19278118800000, -19247533200000,  # 1357
    -19214355600000, -19183683600000, -19153098000000, -19119920400000,  # 1361
    -19089334800000, -19056157200000, -19025571600000, -18994899600000,  # 1365
    -18961722000000, -18931136400000, -18900464400000, -18867286800000,  # 1369
    -18836701200000, -18803610000000, -18772938000000, -18742352400000,  # 1373
    -18709174800000, -18678502800000, -18647917200000, -18614739600000,  # 1377
    -18584154000000, -18553568400000, -18520390800000, -18489805200000,  # 1381
    -18456627600000, -18425955600000, -18395283600000, -18362106000000,  # 1385
    -18331520400000, -18300934800000, -18267757200000, -18237171600000,  # 1389
    -18203994000000, -18173408400000, -18142736400000, -18109558800000,  # 1393
    -18078886800000, -18048301200000, -18015123600000, -17984538000000,  # 1397
    -17953952400000, -17920774800000, -17890189200000, -17857011600000,  # 1401
    -17826339600000, -17795754000000, -17762576400000, -17731904400000,  # 1405
    -17701318800000, -17668227600000, -17637555600000, -17604378000000,  # 1409
    -17573792400000, -17543120400000, -17509942800000, -17479357200000,  # 1413
    -17448771600000, -17415594000000, -17385008400000, -17354336400000,  # 1417
    -17321158800000, -17290573200000, -17257395600000, -17226723600000,  # 1421
    -17196138000000, -17162960400000, -17132374800000, -17101789200000,  # 1425
    -17068611600000, -17037939600000, -17004762000000, -16974176400000,  # 1429
    -16943504400000, -16910413200000, -16879741200000, -16849155600000,  # 1433
    -16815978000000, -16785392400000, -16754720400000, -16721542800000,  # 1437
    -16690957200000, -16657779600000, -16627194000000, -16596608400000,  # 1441
    -16563430800000, -16532845200000, -16502173200000, -16468995600000,  # 1445
    -16438323600000, -16405232400000, -16374560400000, -16343974800000,  # 1449
    -16310797200000, -16280211600000, -16249626000000, -16216448400000,  # 1453
    -16185776400000, -16155104400000, -16121926800000, -16091341200000,  # 1457
    -16058163600000, -16027578000000, -15996992400000, -15963814800000,  # 1461
    -15933229200000, -15902557200000, -15869379600000, -15838794000000,  # 1465
    -15805616400000, -15774944400000, -15744445200000, -15711267600000,  # 1469
    -15680595600000, -15650010000000, -15616832400000, -15586160400000,  # 1473
    -15555574800000, -15522397200000, -15491811600000, -15458634000000,  # 1477
    -15428048400000, -15397376400000, -15364198800000, -15333613200000,  # 1481
    -15302941200000, -15269763600000, -15239178000000, -15206000400000,  # 1485
    -15175414800000, -15144829200000, -15111651600000, -15080979600000,  # 1489
    -15050394000000, -15017216400000, -14986544400000, -14955958800000,  # 1493
    -14922781200000, -14892195600000, -14859104400000, -14828432400000,  # 1497
    -14797846800000, -14764582800000, -14733997200000, -14703325200000,  # 1501
    -14670234000000, -14639648400000, -14606470800000, -14575885200000,  # 1505
    -14545213200000, -14512035600000, -14481363600000, -14450778000000,  # 1509
    -14417600400000, -14387014800000, -14356429200000, -14323251600000,  # 1513
    -14292666000000, -14259488400000, -14228816400000, -14198144400000,  # 1517
    -14164966800000, -14134381200000, -14103795600000, -14070618000000,  # 1521
    -14040032400000, -14006854800000, -13976269200000, -13945597200000,  # 1525
    -13912419600000, -13881834000000, -13851162000000, -13818070800000,  # 1529
    -13787485200000, -13756813200000, -13723635600000, -13693050000000,  # 1533
    -13659872400000, -13629200400000, -13598614800000, -13565437200000,  # 1537
    -13534851600000, -13504266000000, -13471088400000, -13440502800000,  # 1541
    -13407238800000, -13376653200000, -13345981200000, -13312803600000,  # 1545
    -13282218000000, -13251632400000, -13218454800000, -13187869200000,  # 1549
    -13157283600000, -13124106000000, -13093434000000, -13060256400000,  # 1553
    -13029584400000, -12998998800000, -12965821200000, -12935235600000,  # 1557
    -12904650000000, -12871472400000, -12840886800000, -12807622800000,  # 1561
    -12777037200000, -12746365200000, -12713274000000, -12682688400000,  # 1565
    -12652102800000, -12618925200000, -12588253200000, -12557667600000,  # 1569
    -12524403600000, -12493818000000, -12460640400000, -12430054800000,  # 1573
    -12399469200000, -12366291600000, -12335706000000, -12305034000000,  # 1577
    -12271856400000, -12241270800000, -12210598800000, -12177421200000,  # 1581
    -12146835600000, -12113658000000, -12083072400000, -12052486800000,  # 1585
    -12019309200000, -11988637200000, -11958051600000, -11924874000000,  # 1589
    -11894202000000, -11861110800000, -11830525200000, -11799853200000,  # 1593
    -11766675600000, -11736090000000, -11705418000000, -11672240400000,  # 1597
    -11641654800000, -11608477200000, -11577891600000, -11547306000000,  # 1601
    -11514128400000, -11483542800000, -11452870800000, -11419693200000,  # 1605
    -11389021200000, -11358435600000, -11325258000000, -11294672400000,  # 1609
    -11261494800000, -11230909200000, -11200323600000, -11167146000000,  # 1613
    -11136474000000, -11105802000000, -11072624400000, -11042038800000,  # 1617
    -11008861200000, -10978275600000, -10947690000000, -10914512400000,  # 1621
    -10883926800000, -10853254800000, -10820077200000, -10789491600000,  # 1625
    -10758819600000, -10725728400000, -10695142800000, -10661965200000,  # 1629
    -10631293200000, -10600707600000, -10567443600000, -10536858000000,  # 1633
    -10506272400000, -10473094800000, -10442509200000, -10409331600000,  # 1637
    -10378746000000, -10348074000000, -10314896400000, -10284310800000,  # 1641
    -10253638800000, -10220461200000, -10189875600000, -10159290000000,  # 1645
    -10126112400000, -10095526800000, -10062349200000, -10031677200000,  # 1649
    -10001091600000, -9967914000000, -9937242000000, -9906656400000,  # 1653
    -9873565200000, -9842893200000, -9809715600000, -9779130000000,  # 1657
    -9748458000000, -9715280400000, -9684694800000, -9654109200000,  # 1661
    -9620931600000, -9590346000000, -9559760400000, -9526582800000,  # 1665
    -9495910800000, -9462733200000, -9432061200000, -9401475600000,  # 1669
    -9368298000000, -9337712400000, -9307126800000, -9273949200000,  # 1673
    -9243363600000, -9210186000000, -9179514000000, -9148842000000,  # 1677
    -9115664400000, -9085078800000, -9054493200000, -9021315600000,  # 1681
    -8990730000000, -8960144400000, -8926966800000, -8896294800000,  # 1685
    -8865709200000, -8832531600000, -8801946000000, -8768768400000,  # 1689
    -8738182800000, -8707597200000, -8674419600000, -8643747600000,  # 1693
    -8613075600000, -8579898000000, -8549312400000, -8516134800000,  # 1697
    -8485549200000, -8454963600000, -8421786000000, -8391200400000,  # 1701
    -8360528400000, -8327350800000, -8296678800000, -8266093200000,  # 1705
    -8232915600000, -8202330000000, -8169238800000, -8138566800000,  # 1709
    -8107981200000, -8074717200000, -8044131600000, -8013459600000,  # 1713
    -7980368400000, -7949782800000, -7916605200000, -7886019600000,  # 1717
    -7855347600000, -7822170000000, -7791584400000, -7760912400000,  # 1721
    -7727734800000, -7697149200000, -7666563600000, -7633386000000,  # 1725
    -7602800400000, -7569622800000, -7538950800000, -7508365200000,  # 1729
    -7475187600000, -7444515600000, -7413930000000, -7380752400000,  # 1733
    -7350166800000, -7316989200000, -7286403600000, -7255731600000,  # 1737
    -7222554000000, -7191968400000, -7161296400000, -7128118800000,  # 1741
    -7097619600000, -7064442000000, -7033770000000, -7003184400000,  # 1745
    -6970006800000, -6939334800000, -6908749200000, -6875571600000,  # 1749
    -6844986000000, -6814400400000, -6781222800000, -6750637200000,  # 1753
    -6717459600000, -6686787600000, -6656115600000, -6622938000000,  # 1757
    -6592352400000, -6561766800000, -6528589200000, -6498003600000,  # 1761
    -6464826000000, -6434240400000, -6403568400000, -6370390800000,  # 1765
    -6339718800000, -6309133200000, -6275955600000, -6245370000000,  # 1769
    -6214784400000, -6181606800000, -6151021200000, -6117843600000,  # 1773
    -6087171600000, -6056586000000, -6023408400000, -5992822800000,  # 1777
    -5962237200000, -5929059600000, -5898387600000, -5867802000000,  # 1781
    -5834624400000, -5803952400000, -5770774800000, -5740189200000,  # 1785
    -5709603600000, -5676426000000, -5645840400000, -5615168400000,  # 1789
    -5581990800000, -5551405200000, -5518227600000, -5487555600000,  # 1793
    -5456970000000, -5423792400000, -5393206800000, -5362621200000,  # 1797
    -5329443600000, -5298771600000, -5268186000000, -5235008400000,  # 1801
    -5204336400000, -5171245200000, -5140659600000, -5109987600000,  # 1805
    -5076896400000, -5046224400000, -5015552400000, -4982374800000,  # 1809
    -4951789200000, -4918611600000, -4888026000000, -4857440400000,  # 1813
    -4824262800000, -4793677200000, -4763005200000, -4729827600000,  # 1817
    -4699155600000, -4668570000000, -4635392400000, -4604806800000,  # 1821
    -4571629200000, -4541043600000, -4510458000000, -4477280400000,  # 1825
    -4446608400000, -4415936400000, -4382758800000, -4352173200000,  # 1829
    -4318995600000, -4288410000000, -4257824400000, -4224646800000,  # 1833
    -4194061200000, -4163389200000, -4130211600000, -4099626000000,  # 1837
    -4068954000000, -4035862800000, -4005277200000, -3972099600000,  # 1841
    -3941427600000, -3910842000000, -3877664400000, -3846992400000,  # 1845
    -3816406800000, -3783229200000, -3752643600000, -3722058000000,  # 1849
    -3688880400000, -3658208400000, -3625030800000, -3594445200000,  # 1853
    -3563773200000, -3530595600000, -3500010000000, -3469424400000,  # 1857
    -3436246800000, -3405661200000, -3372483600000, -3341811600000,  # 1861
    -3311226000000, -3278048400000, -3247376400000, -3216790800000,  # 1865
    -3183699600000, -3153027600000, -3119936400000, -3089264400000,  # 1869
)
